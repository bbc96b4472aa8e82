#!/usr/bin/env python3
"""
Attraction Finder Manual Check Script

Runs the list flow (and optionally the detail flow) once against the real
Gemini API, without starting the server or the browser front end.

The list flow uses Gemini with Google Maps grounding, so the printed
attractions and references come from live Maps data.

Usage:
    python scripts/try_attractions.py
    python scripts/try_attractions.py --lat 25.0330 --lon 121.5654 --category food --distance 1km
    python scripts/try_attractions.py --details 台北101
"""

import argparse
import asyncio
import logging
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

# Skip import-time key validation so a missing key is reported below
os.environ.setdefault("VALIDATE_CONFIG", "false")

from attraction_finder.errors import AttractionFinderError
from attraction_finder.schemas.attractions import (
    CategoryOption,
    Coordinates,
    DistanceOption,
)
from attraction_finder.services.recommendation_service import (
    fetch_attraction_detail,
    fetch_attractions,
)


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_attractions(result):
    print("\n" + "=" * 60)
    print(f"ATTRACTIONS: {len(result.attractions)} (dropped lines: {result.dropped_line_count})")
    print("=" * 60)

    if not result.attractions:
        print("\n❌ The reply could not be parsed into any attraction\n")

    for i, attraction in enumerate(result.attractions, 1):
        print(f"\n--- #{i} {attraction.name} ---")
        print(f"  Description: {attraction.description}")
        print(f"  Address:     {attraction.address}")
        print(f"  Location:    {attraction.coordinates.latitude}, {attraction.coordinates.longitude}")
        print(f"  Navigate:    {attraction.navigation_url}")

    if result.grounding_references:
        print("\n📍 Google Maps references:")
        for ref in result.grounding_references:
            print(f"   - {ref.title or ref.uri}: {ref.uri}")
    print()


def print_detail(name, detail):
    print("\n" + "=" * 60)
    print(f"DETAILS: {name}")
    print("=" * 60)
    print(f"\n{detail.description}\n")
    print(f"🚇 {detail.traffic}\n")
    for review in detail.reviews:
        print(f"   💬 {review.text}")
    print()


async def run_list_flow(coordinates, category, distance):
    print("\nCalling Gemini API (with Google Maps grounding)...")
    print(f"Coordinates: {coordinates.latitude}, {coordinates.longitude}")
    print(f"Category:    {category.value}")
    print(f"Distance:    {distance.value}")

    result = await fetch_attractions(coordinates, category, distance)
    print_attractions(result)
    return result


async def run_detail_flow(name):
    print(f"\nCalling Gemini API for details of {name}...")
    detail = await fetch_attraction_detail(name)
    print_detail(name, detail)
    return detail


async def run(args):
    if not (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")):
        print("\n⚠️  ERROR: GEMINI_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GEMINI_API_KEY=your-gemini-api-key")
        print("\n   Get your API key at: https://aistudio.google.com/app/apikey")
        return

    try:
        if args.details:
            await run_detail_flow(args.details)
            return

        result = await run_list_flow(
            Coordinates(latitude=args.lat, longitude=args.lon),
            CategoryOption(args.category),
            DistanceOption(args.distance),
        )
        if args.follow and result.attractions:
            await run_detail_flow(result.attractions[0].name)
    except AttractionFinderError as e:
        print(f"\n❌ {e.error}: {e.user_message}\n")


def main():
    parser = argparse.ArgumentParser(
        description="Query nearby attractions once against the real Gemini API",
    )
    parser.add_argument("--lat", type=float, default=25.0330, help="Latitude (default: Taipei 101)")
    parser.add_argument("--lon", type=float, default=121.5654, help="Longitude (default: Taipei 101)")
    parser.add_argument(
        "--category",
        choices=[c.value for c in CategoryOption],
        default=CategoryOption.ALL.value,
    )
    parser.add_argument(
        "--distance",
        choices=[d.value for d in DistanceOption],
        default=DistanceOption.KM_5.value,
    )
    parser.add_argument("--details", type=str, help="Only fetch details for this attraction name")
    parser.add_argument(
        "--follow",
        action="store_true",
        help="Also fetch details for the first attraction returned",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    asyncio.run(run(args))


if __name__ == "__main__":
    main()
