#!/usr/bin/env python3
"""
Disaster Reporter - Submit a Report from the Command Line
Fills the report form from arguments and uploads it to the backend.
"""
import argparse
import asyncio
import os
import sys

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from src.backend.client import BackendClient
from src.core.config import settings
from src.core.constants import DisasterCategory
from src.core.logging import setup_logging
from src.media.image_picker import FileSystemImagePicker, ImageSource
from src.screens.base import ConsoleAlerter, ConsoleNavigator
from src.storage.local_store import LocalStore, save_logged_in_user
from src.screens.report_screen import ReportScreen


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Submit a disaster report")
    parser.add_argument("--server-url", default=settings.server_url,
                        help="Backend base URL (default: SERVER_URL)")
    parser.add_argument("--store", default=settings.local_store_url,
                        help="SQLAlchemy URL of the local store")
    parser.add_argument("--username",
                        help="Store this username as the logged-in user first")
    parser.add_argument("--location", default="")
    parser.add_argument("--category", default="",
                        choices=[""] + [c.value for c in DisasterCategory])
    parser.add_argument("--description", default="")
    parser.add_argument("--image", action="append", default=[],
                        help="Image file to attach (repeatable)")
    return parser.parse_args(argv)


async def run(args) -> bool:
    store = LocalStore(args.store)
    if args.username:
        save_logged_in_user(store, {"username": args.username})

    alerter = ConsoleAlerter()
    navigator = ConsoleNavigator()
    picker = FileSystemImagePicker(args.image)

    async with BackendClient(args.server_url) as backend:
        screen = ReportScreen(
            backend=backend,
            store=store,
            picker=picker,
            alerter=alerter,
            navigator=navigator,
            route_params={"location": args.location},
        )
        screen.select_category(args.category)
        screen.set_description(args.description)

        while picker.remaining:
            await screen.attach_image(ImageSource.GALLERY)

        result = await screen.submit()

    store.close()
    return result.ok


def main():
    args = parse_args()
    setup_logging()

    print("=" * 60)
    print("Disaster Reporter - Submitting Report")
    print("=" * 60)
    print(f"Backend: {args.server_url}")

    ok = asyncio.run(run(args))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
