import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd
from loguru import logger

from placescout.clients import PlacesClient
from placescout.config import DEFAULT_PAGE_SIZE, EXPORT_DIR, LOG_LEVEL, PAGE_SIZES
from placescout.display import (
    pagination_summary,
    rating_label,
    stats_summary,
    status_label,
    today_opening_hours,
)
from placescout.exceptions import PlaceScoutError
from placescout.exporters.csv_exporter import write_csv
from placescout.models import SortDirection, SortField, TableView, ViewState, WebhookResponse
from placescout.search_session import SearchSession
from placescout.view import view_state as reducers


def load_records_from_file(file_path: str) -> Any:
    """
    Load a saved payload from disk.

    JSON files may hold the record list itself or a saved response envelope
    (``{"data": [...]}``). CSV files are read with pandas, one record per row.
    """
    path = Path(file_path)
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path)
        records = []
        for _, row in df.iterrows():
            # NaN cells become None so the resolver sees them as absent
            records.append({col: (None if pd.isna(val) else val) for col, val in row.items()})
        return records

    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "data" in data:
        return data["data"]
    return data


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search local businesses and export the results.")
    parser.add_argument("--location", default="", help="Target location, e.g. 'New York, NY'")
    parser.add_argument("--term", default="", help="Business category, e.g. 'restaurants'")
    parser.add_argument("--input", help="Read records from a JSON or CSV file instead of the webhook")
    parser.add_argument("--sort", choices=[f.value for f in SortField], default=SortField.RATING.value)
    parser.add_argument("--direction", choices=[d.value for d in SortDirection], default=SortDirection.DESC.value)
    parser.add_argument("--filter", default="", help="Only show places whose name, category, address or city contains this text")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--page-size", type=int, choices=PAGE_SIZES, default=DEFAULT_PAGE_SIZE)
    parser.add_argument("--export", help="Write the filtered, sorted view to this CSV path")
    parser.add_argument(
        "--export-dir",
        nargs="?",
        const=EXPORT_DIR,
        help=f"Write the CSV under the standard filename in this directory (without a value: {EXPORT_DIR})",
    )
    return parser.parse_args(argv)


def print_table(view: TableView) -> None:
    if view.stats:
        print(stats_summary(view.stats))
    for place in view.displayed_page:
        print(
            f"- {place.title or 'Business Name'} | {place.category_name or 'Business'} | "
            f"{rating_label(place)} ({place.reviews_count} reviews) | {place.address} | "
            f"{status_label(place)} | {today_opening_hours(place.opening_hours)}"
        )
    summary = pagination_summary(view)
    if summary:
        print(f"{summary} (page {view.view_state.current_page} of {view.total_pages})")


async def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one search (or load a saved payload), print the requested page and
    optionally write the CSV export.
    """
    args = parse_args(argv)

    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    session = SearchSession(view_state=ViewState(page_size=args.page_size))
    try:
        if args.input:
            session.location, session.search_term = args.location, args.term
            data = load_records_from_file(args.input)
            session.load_response(WebhookResponse(data=data, status=200, status_text="OK"))
        else:
            await session.submit(args.location, args.term)
    except PlaceScoutError as e:
        logger.error(str(e))
        return 1
    except (OSError, ValueError) as e:
        # unreadable --input file: missing, not JSON, not parseable CSV
        logger.error(f"Could not read {args.input}: {e}")
        return 1
    finally:
        # Cleanup: close the shared aiohttp session
        await PlacesClient().close()

    session.view_state = reducers.set_sort(session.view_state, SortField(args.sort), SortDirection(args.direction))
    session.set_filter_text(args.filter)
    session.go_to_page(args.page)

    view = session.view()
    if not isinstance(view, TableView):
        logger.warning("Response does not contain places; showing it as JSON")
        print(session.response_json())
        return 0

    print_table(view)

    if args.export or args.export_dir:
        output_path = args.export or str(Path(args.export_dir) / session.export_filename())
        write_csv(session.export_csv(), output_path)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
