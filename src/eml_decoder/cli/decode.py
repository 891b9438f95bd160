"""
Command-line interface for decoding .eml files.

Usage:
    # Decode a file, saving attachments to ./attachments
    python -m eml_decoder.cli.decode message.eml

    # Read from stdin, custom attachment directory
    eml-decode --attachments-dir out/ < message.eml

    # JSON summary without writing attachments
    eml-decode message.eml --json --no-save
"""

import argparse
import hashlib
import json
import sys
from pathlib import Path
from typing import BinaryIO, List, Optional

import structlog

from eml_decoder.config import settings
from eml_decoder.decoder import Decoder
from eml_decoder.errors import ContentDecodeError, EmlDecodeError
from eml_decoder.logging_config import setup_logging
from eml_decoder.models.email_content import Attachment, EmailContent


# Setup logging
setup_logging()
logger = structlog.get_logger(__name__)


class AttachmentSaver:
    """
    Attachment callback writing each attachment into a directory.

    With ``save`` disabled the content is still drained so sizes and hashes
    can be reported.
    """

    def __init__(self, directory: Path, save: bool = True):
        self.directory = directory
        self.save = save
        self.saved: List[dict] = []

    def __call__(self, attachment: Attachment) -> None:
        digest = hashlib.sha256()
        size = 0
        error = None
        target = None

        try:
            if self.save:
                self.directory.mkdir(parents=True, exist_ok=True)
                target = self.directory / attachment.filename
                with open(target, "wb") as f:
                    for chunk in iter(lambda: attachment.content.read(64 * 1024), b""):
                        digest.update(chunk)
                        size += len(chunk)
                        f.write(chunk)
                logger.info("attachment_saved", path=str(target), size_bytes=size)
            else:
                for chunk in iter(lambda: attachment.content.read(64 * 1024), b""):
                    digest.update(chunk)
                    size += len(chunk)
        except ContentDecodeError as e:
            logger.warning("attachment_decode_failed", filename=attachment.filename, error=str(e))
            error = str(e)
            # Partial output is not kept
            if target is not None:
                target.unlink(missing_ok=True)

        record = {
            "filename": attachment.filename,
            "content_type": attachment.content_type,
            "size_bytes": size,
            "sha256": digest.hexdigest(),
        }
        if error is not None:
            record["error"] = error
        self.saved.append(record)


def decode_stream(source: BinaryIO, saver: AttachmentSaver) -> EmailContent:
    """Decode one message, handing attachments to ``saver``."""
    return Decoder(source, saver).decode()


def write_summary(email: EmailContent, attachments: List[dict], as_json: bool) -> None:
    """
    Print the decoded message to stdout.

    Args:
        email: Decoded message
        attachments: Attachment records collected by the saver
        as_json: Print a JSON document instead of plain text
    """
    if as_json:
        print(json.dumps({
            "from": email.header("From"),
            "subject": email.header("Subject"),
            "plain_text": email.plain_text,
            "html": email.html,
            "attachments": attachments,
        }, ensure_ascii=False, indent=2))
        return

    print(f"From: {email.header('From')}\nSubject: {email.header('Subject')}")
    print(email.plain_text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Decode an .eml message: print its text body and extract attachments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s message.eml
  %(prog)s --attachments-dir out/ < message.eml
  %(prog)s message.eml --json --no-save
        """
    )

    parser.add_argument(
        "input",
        type=str,
        nargs="?",
        default=None,
        help="Path to .eml file (default: read from stdin)"
    )

    parser.add_argument(
        "--attachments-dir",
        "-a",
        type=str,
        default=settings.attachments_dir,
        help=f"Directory to save attachments into (default: {settings.attachments_dir})"
    )

    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write attachments to disk"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging (on stderr)"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level="DEBUG")

    saver = AttachmentSaver(Path(args.attachments_dir), save=not args.no_save)

    try:
        if args.input:
            input_path = Path(args.input)
            if not input_path.is_file():
                print(f"Error: File not found: {input_path}", file=sys.stderr)
                return 1
            with open(input_path, "rb") as f:
                email = decode_stream(f, saver)
        else:
            email = decode_stream(sys.stdin.buffer, saver)

        write_summary(email, saver.saved, args.json)

        if args.verbose:
            print(f"\n✓ Extracted {len(saver.saved)} attachments", file=sys.stderr)

    except EmlDecodeError as e:
        logger.error("decode_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
