#!/usr/bin/env python3
"""Cria um evento real no Google Calendar para validar credenciais.

Uso:
    python scripts/smoke_create_event.py
    python scripts/smoke_create_event.py --date 2025-03-10 --time 09:30 --title Kickoff

Padrao: amanha as 14:00, com as credenciais do .env. Requer o pacote
instalado (`pip install -e .`).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import date, timedelta

from dotenv import load_dotenv

from app.bootstrap.dependencies import create_calendar_service
from app.domain.appointment import MeetingRequest
from utils.errors import CalendarServiceError

TROUBLESHOOTING = (
    "Check your .env file has GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET and GOOGLE_REFRESH_TOKEN",
    "Verify the Google Calendar API is enabled for the OAuth client",
    "Confirm the refresh token is still valid",
    "Make sure your account is listed as a test user on the OAuth consent screen",
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--name", default="Test User")
    parser.add_argument("--date", default=tomorrow, help="YYYY-MM-DD (padrao: amanha)")
    parser.add_argument("--time", default="14:00", help="HH:MM, 24h")
    parser.add_argument("--title", default="Test Meeting from Voice Agent")
    return parser.parse_args(argv)


async def run_smoke(args: argparse.Namespace) -> int:
    request = MeetingRequest(name=args.name, date=args.date, time=args.time, title=args.title)
    print("Creating event:")
    print(f"  Name:  {request.name}")
    print(f"  Date:  {request.date}")
    print(f"  Time:  {request.time}")
    print(f"  Title: {request.title}\n")

    try:
        event = await create_calendar_service().create_event(request)
    except CalendarServiceError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        print("\nPossible issues:", file=sys.stderr)
        for index, hint in enumerate(TROUBLESHOOTING, start=1):
            print(f"  {index}. {hint}", file=sys.stderr)
        return 1

    print("SUCCESS! Event created:")
    print(f"  Event ID:   {event.event_id}")
    print(f"  Event Link: {event.event_link}")
    print(f"  Summary:    {event.summary}")
    print(f"  Start:      {event.start}")
    print(f"  End:        {event.end}")
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    return asyncio.run(run_smoke(_parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
