import argparse
import json
import mimetypes
import sys
from pathlib import Path

from expense_intake.config.settings import Settings
from expense_intake.database.connection import close_pool, init_pool
from expense_intake.logging.logger import Log
from expense_intake.processor.factory import FileProcessorFactory
from expense_intake.processor.models import UploadContext, UploadedFile
from expense_intake.upload.handler import ExpenseUploadHandler


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract and log an expense from a receipt photo or voice note."
    )
    parser.add_argument("file", type=Path, help="Path to the image or audio file")
    parser.add_argument("--household-id", required=True)
    parser.add_argument("--user-id", required=True)
    parser.add_argument(
        "--media-type",
        help="Declared media type; guessed from the file name when omitted",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> pool -> pipeline -> one upload."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    media_type = args.media_type or mimetypes.guess_type(args.file.name)[0] or ""
    upload = UploadedFile(
        media_type=media_type,
        original_name=args.file.name,
        path=args.file,
    )
    context = UploadContext(household_id=args.household_id, user_id=args.user_id)

    init_pool(settings)
    try:
        handler = ExpenseUploadHandler(FileProcessorFactory.create(settings))
        response = handler.handle(upload, context)
    finally:
        close_pool()

    print(json.dumps({"status": response.status_code, **response.body}, indent=2))
    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
