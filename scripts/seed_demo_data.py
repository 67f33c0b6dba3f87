#!/usr/bin/env python
"""
Seed demo data script.
"""
import os
import sys
import django

# Setup Django
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'backend'))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'careerchat.settings')
django.setup()

from careerchat.db.seed import seed_demo_data  # noqa: E402

if __name__ == '__main__':
    reset = '--keep' not in sys.argv[1:]
    print("Seeding demo data...")
    counts = seed_demo_data(reset=reset)
    print(
        f"Demo data seeded successfully! "
        f"({counts['users']} users, {counts['sessions']} sessions, {counts['messages']} messages)"
    )
