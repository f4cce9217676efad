"""
Command-line access to the rental services.

Examples:
    python rental_cli.py companies
    python rental_cli.py report Hertz --year 2024
    python rental_cli.py book alice Hertz Compact Brussels 2024-03-10 2024-03-12
    python rental_cli.py reservations alice
    python rental_cli.py best-clients
"""
import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add backend directory to Python path
backend_dir = Path(__file__).parent
sys.path.insert(0, str(backend_dir))

from pydantic import ValidationError as PydanticValidationError

from constants import ReservationFailure
from database import SessionLocal
from dtos.request.reservation_request import ReservationConstraintsRequest
from dtos.response.reservation_response import QuoteResponse, ReservationResponse
from exceptions import ApplicationError, ReservationError
from init_db import init_database
from services.manager_service import ManagerService
from services.reservation_service import ReservationService
from utils.logging_utils import configure_logging


def parse_timestamp(value: str) -> datetime:
    """ISO 8601 date or time; a trailing Z or an offset is converted to naive UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 timestamp: {value}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _print_json(payload):
    print(json.dumps(payload, indent=2, default=str))


def cmd_companies(db, args):
    _print_json(ReservationService(db, renter="").get_all_rental_companies())


def cmd_report(db, args):
    report = ManagerService(db).build_company_report(args.company, args.year)
    _print_json(report.model_dump())


def cmd_book(db, args):
    session = ReservationService(db, renter=args.renter)
    request = ReservationConstraintsRequest(
        start_date=args.start,
        end_date=args.end,
        car_type=args.car_type,
        region=args.region
    )
    quote = session.create_quote(args.company, request)
    print("Quote:")
    _print_json(QuoteResponse.model_validate(quote).model_dump())
    reservations = session.confirm_quotes()
    print("Reservation:")
    _print_json([ReservationResponse.model_validate(r).model_dump() for r in reservations])


def cmd_reservations(db, args):
    reservations = ReservationService(db, renter=args.renter).get_reservations()
    _print_json([ReservationResponse.model_validate(r).model_dump() for r in reservations])


def cmd_best_clients(db, args):
    _print_json(sorted(ManagerService(db).get_best_clients()))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Car rental bookkeeping")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("companies", help="List rental companies").set_defaults(func=cmd_companies)

    report = sub.add_parser("report", help="Reservation figures of a company")
    report.add_argument("company")
    report.add_argument("--year", type=int, default=None)
    report.set_defaults(func=cmd_report)

    book = sub.add_parser("book", help="Quote and confirm a reservation")
    book.add_argument("renter")
    book.add_argument("company")
    book.add_argument("car_type")
    book.add_argument("region")
    book.add_argument("start", type=parse_timestamp)
    book.add_argument("end", type=parse_timestamp)
    book.set_defaults(func=cmd_book)

    reservations = sub.add_parser("reservations", help="Reservations of a renter")
    reservations.add_argument("renter")
    reservations.set_defaults(func=cmd_reservations)

    sub.add_parser("best-clients", help="Renters with the most reservations").set_defaults(func=cmd_best_clients)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    init_database()

    db = SessionLocal()
    try:
        args.func(db, args)
        return 0
    except ReservationError as e:
        print(f"❌ {ReservationFailure.get_ui_label(e.reason)}: {e.message}", file=sys.stderr)
        return 1
    except ApplicationError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1
    except PydanticValidationError as e:
        print(f"❌ Invalid request: {e}", file=sys.stderr)
        return 2
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
