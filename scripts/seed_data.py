#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with accounts and a small catalog for development.

USAGE:
    python scripts/seed_data.py            # clear, then seed
    python scripts/seed_data.py --keep     # seed on top of existing data

Accounts created (password P@ssword1 for all):
- admin@bookstore.com      Administrator + Customer
- customer1@gmail.com      Customer
- customer2@gmail.com      Customer
"""

import argparse
import sys
from decimal import Decimal
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookstore.database import SessionLocal, create_tables
from bookstore.models import Author, Book, Role, User, UserRole
from bookstore.services.security import hash_password

SEED_PASSWORD = "P@ssword1"


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.execute(delete(UserRole))
    db.execute(delete(User))
    db.commit()
    print("Data cleared.")


def create_users(db: Session) -> list[User]:
    print("Creating users...")
    accounts = [
        ("admin@bookstore.com", [Role.ADMINISTRATOR, Role.CUSTOMER]),
        ("customer1@gmail.com", [Role.CUSTOMER]),
        ("customer2@gmail.com", [Role.CUSTOMER]),
    ]

    users = []
    for email, roles in accounts:
        user = User(
            email=email,
            hashed_password=hash_password(SEED_PASSWORD),
            roles=[UserRole(role=role.value) for role in roles],
        )
        db.add(user)
        users.append(user)

    db.commit()
    print(f"Created {len(users)} users.")
    return users


def create_authors(db: Session) -> dict[str, Author]:
    print("Creating authors...")
    authors_data = [
        {
            "first_name": "George",
            "last_name": "Orwell",
            "bio": "English novelist and essayist, best known for '1984'.",
        },
        {
            "first_name": "Jane",
            "last_name": "Austen",
            "bio": "English novelist of the landed gentry.",
        },
        {
            "first_name": "Chinua",
            "last_name": "Achebe",
            "bio": "Nigerian novelist, poet and critic.",
        },
    ]

    authors = {}
    for data in authors_data:
        author = Author(**data)
        db.add(author)
        authors[data["last_name"]] = author

    db.commit()
    for author in authors.values():
        db.refresh(author)

    print(f"Created {len(authors)} authors.")
    return authors


def create_books(db: Session, authors: dict[str, Author]) -> list[Book]:
    print("Creating books...")
    books_data = [
        {
            "title": "1984",
            "year": 1949,
            "isbn": "9780451524935",
            "summary": "A dystopian novel set in a totalitarian society.",
            "price": Decimal("12.99"),
            "author": "Orwell",
        },
        {
            "title": "Animal Farm",
            "year": 1945,
            "isbn": "9780451526342",
            "summary": "A farm revolution that goes wrong.",
            "price": Decimal("8.99"),
            "author": "Orwell",
        },
        {
            "title": "Pride and Prejudice",
            "year": 1813,
            "isbn": "9780141439518",
            "summary": "Elizabeth Bennet and Mr. Darcy.",
            "price": Decimal("9.99"),
            "author": "Austen",
        },
        {
            "title": "Things Fall Apart",
            "year": 1958,
            "isbn": "9780385474542",
            "summary": "Okonkwo and the arrival of colonialism.",
            "price": Decimal("11.50"),
            "author": "Achebe",
        },
    ]

    books = []
    for data in books_data:
        author = authors[data.pop("author")]
        book = Book(**data, author_id=author.id)
        db.add(book)
        books.append(book)

    db.commit()
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """Create tables if needed, then insert the seed data."""
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        users = create_users(db)
        authors = create_authors(db)
        books = create_books(db, authors)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Users: {len(users)}")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the BookStore database.")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing rows instead of clearing them first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)


if __name__ == "__main__":
    main()
