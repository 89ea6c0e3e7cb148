"""Seed script: creates the demo users via the REST API.

Usage:
    python scripts/seed.py              # uses http://localhost:8080
    python scripts/seed.py http://host  # custom base URL
"""

import sys

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8080"

USERS = [
    {
        "first_name": "Hulk",
        "last_name": "Hogan",
        "nickname": "hulkster",
        "password": "password123",
        "email": "hulk@example.com",
        "country": "USA",
    },
    {
        "first_name": "Bob",
        "last_name": "Dylan",
        "nickname": "zimmy",
        "password": "password123",
        "email": "bob@example.com",
        "country": "USA",
    },
    {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "nickname": "enchantress",
        "password": "password123",
        "email": "ada@example.com",
        "country": "UK",
    },
    {
        "first_name": "Alan",
        "last_name": "Turing",
        "nickname": "prof",
        "password": "password123",
        "email": "alan@example.com",
        "country": "UK",
    },
]


def create(client: httpx.Client, user: dict) -> None:
    resp = client.post(f"{BASE_URL}/user", data=user)
    if resp.status_code == 201:
        print(f"  Created {user['email']}")
    elif resp.status_code == 500 and user["email"] in {u["email"] for u in existing(client)}:
        print(f"  {user['email']} already exists, skipping")
    else:
        resp.raise_for_status()


def existing(client: httpx.Client) -> list[dict]:
    resp = client.get(f"{BASE_URL}/users")
    resp.raise_for_status()
    return resp.json()


def main() -> None:
    print(f"Seeding against {BASE_URL}\n")

    with httpx.Client(timeout=10) as client:
        print("Users:")
        for user in USERS:
            create(client, user)

    print("\nDone!")


if __name__ == "__main__":
    main()
