"""CLI entry point: look up a date or list the holidays of a period."""

import argparse
from datetime import date
from pathlib import Path

from .config import load_config
from .frames import holidays_frame
from .holidays import get_holiday, get_holidays


def _label(holiday, language: str) -> str:
    return holiday.name_en if language == "en" else holiday.name


def main(argv=None):
    cfg = load_config()

    parser = argparse.ArgumentParser(description="Japanese public holidays")
    parser.add_argument("--date", type=date.fromisoformat, default=None,
                        help="Check a single date (YYYY-MM-DD)")
    parser.add_argument("--year", type=int, default=None,
                        help="List a whole calendar year")
    parser.add_argument("--start", type=date.fromisoformat, default=None,
                        help="Start date (YYYY-MM-DD, default: Jan 1 of this year)")
    parser.add_argument("--end", type=date.fromisoformat, default=None,
                        help="End date (YYYY-MM-DD, default: Dec 31 of the start year)")
    parser.add_argument("--lang", choices=["ja", "en"], default=cfg["listing"]["language"],
                        help="Language of holiday names")
    parser.add_argument("--output", type=Path, default=None,
                        help="Also write the listing to this CSV file")
    args = parser.parse_args(argv)

    if args.date is not None:
        holiday = get_holiday(args.date)
        if holiday is None:
            print(f"{args.date.isoformat()} {args.date:%a}  not a holiday")
        else:
            print(f"{args.date.isoformat()} {args.date:%a}  {_label(holiday, args.lang)}")
        return 0

    if args.year is not None:
        start, end = date(args.year, 1, 1), date(args.year, 12, 31)
    else:
        start = args.start or date(date.today().year, 1, 1)
        end = args.end or date(start.year, 12, 31)
    if end < start:
        parser.error(f"--end {end} is before --start {start}")

    holidays = get_holidays(start, end)
    print(f"Holidays {start} to {end}: {len(holidays)}")
    for h in holidays:
        print(f"  {h.date.isoformat()} {h.date:%a}  {_label(h, args.lang)}")

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        holidays_frame(start, end).to_csv(args.output, index=False)
        print(f"  Saved: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
