#!/usr/bin/env python3
"""Walk the booking flow against a running server through the assistant webhook."""

import os
import sys
from datetime import date, timedelta

import requests

BASE_URL = os.environ.get("BASE_URL", "http://localhost:8000")


def call_tool(name, arguments=None):
    """Send one tool call to the webhook and return its result."""
    payload = {
        "message": {
            "type": "tool-calls",
            "toolCalls": [
                {
                    "id": f"check-{name}",
                    "type": "function",
                    "function": {"name": name, "arguments": arguments or {}},
                }
            ],
        }
    }
    response = requests.post(f"{BASE_URL}/vapi/webhook", json=payload)
    response.raise_for_status()
    return response.json()["results"][0]["result"]


def check_health():
    """Check health endpoint."""
    print("Checking health endpoint...")
    response = requests.get(f"{BASE_URL}/health")
    print(f"  Status: {response.status_code}")
    assert response.status_code == 200
    print("  ✓ Health check passed\n")


def check_facilities():
    """Fetch facilities and return the first one."""
    print("Getting facilities...")
    facilities = call_tool("getFacilities")["facilities"]
    print(f"  Found {len(facilities)} facility(ies)")
    assert facilities, "No facilities found, run: python -m icetime.seed"
    first = facilities[0]
    print(f"  Using: {first['name']} ({first['id']})")
    print("  ✓ Facility listing passed\n")
    return first


def check_availability(facility_id, day):
    """Return the free slots for a facility on a day."""
    print(f"Checking availability for {day}...")
    result = call_tool("checkAvailability", {"facilityId": facility_id, "date": day})
    slots = result["availability"][0]["availableSlots"]
    print(f"  {len(slots)} free slot(s)")
    assert slots, "No available slots"
    print("  ✓ Availability passed\n")
    return slots


def check_booking(facility_id, day, slot):
    """Book a slot, confirm a repeat is rejected, then cancel."""
    print(f"Booking {slot}...")
    arguments = {
        "facilityId": facility_id,
        "date": day,
        "timeSlot": slot,
        "customerName": "Test User",
        "customerPhone": "613-555-1234",
        "customerEmail": "test@example.com",
    }
    result = call_tool("bookAppointment", arguments)
    assert result["success"], result
    booking = result["booking"]
    print(f"  {booking['confirmationMessage']}")

    repeat = call_tool("bookAppointment", arguments)
    assert not repeat["success"], "Slot was booked twice"
    print(f"  Repeat rejected: {repeat['error']}")

    cancelled = call_tool("cancelAppointment", {"bookingId": str(booking["id"])})
    assert cancelled["success"], cancelled
    print(f"  {cancelled['message']}")
    print("  ✓ Booking flow passed\n")


def main():
    """Run all checks."""
    print("=" * 60)
    print("ICE RINK BOOKING - FLOW CHECK")
    print("=" * 60)
    print()

    try:
        check_health()
        facility = check_facilities()
        day = (date.today() + timedelta(days=1)).isoformat()
        slots = check_availability(facility["id"], day)
        check_booking(facility["id"], day, slots[0])

        print("=" * 60)
        print("ALL CHECKS PASSED! ✓")
        print("=" * 60)

    except requests.exceptions.ConnectionError:
        print("\n❌ ERROR: Could not connect to the API")
        print("   Make sure the server is running:")
        print("   uvicorn icetime.main:app --reload")
        sys.exit(1)
    except AssertionError as e:
        print(f"\n❌ CHECK FAILED: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
