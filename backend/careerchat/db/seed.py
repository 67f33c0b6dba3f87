"""
Demo data for local development.

Users are created directly; sessions and messages go through the chat
service so sequence numbers, last_message and updated_at are consistent
with what the API would have produced.
"""
from typing import Dict
from django.contrib.auth import get_user_model
from django.db import transaction
from careerchat.core.logging import get_logger
from careerchat.db.models import ChatSession, MessageRole
from careerchat.services import chat_service

logger = get_logger(__name__)

DEMO_USERS = [
    {"id": "demo_alice_johnson", "name": "Alice Johnson", "email": "alice.johnson@email.com"},
    {"id": "demo_bob_smith", "name": "Bob Smith", "email": "bob.smith@email.com"},
    {"id": "demo_carol_davis", "name": "Carol Davis", "email": "carol.davis@email.com"},
    {"id": "demo_david_wilson", "name": "David Wilson", "email": "david.wilson@email.com"},
]

USER = MessageRole.USER
ASSISTANT = MessageRole.ASSISTANT

# Every demo user gets one session per conversation below
SHARED_CONVERSATIONS = [
    (
        "Exploring Software Engineering Career",
        [
            (USER, "I'm interested in becoming a software engineer but I'm not sure where to start. "
                   "Can you help me understand the different paths available?"),
            (ASSISTANT, "Absolutely! Software engineering offers several career paths:\n\n"
                        "1. **Frontend Development** - Building user interfaces with React, Vue, or Angular\n"
                        "2. **Backend Development** - Server-side logic, APIs, and databases\n"
                        "3. **Full-Stack Development** - Both frontend and backend\n"
                        "4. **DevOps/Cloud Engineering** - Infrastructure and deployment\n"
                        "5. **Mobile Development** - iOS/Android apps\n"
                        "6. **Data Engineering** - Data pipelines and analytics\n\n"
                        "What type of work interests you most?"),
            (USER, "I'm more interested in backend development. What skills should I focus on?"),
            (ASSISTANT, "Great choice! Focus on these areas:\n\n"
                        "**Languages:** Python (Django/Flask), JavaScript (Node.js), Java or Go\n"
                        "**Databases:** PostgreSQL, Redis, schema design and query optimization\n"
                        "**Concepts:** REST API design, authentication, caching, cloud deployment\n\n"
                        "A good path is to master one language, learn database fundamentals, build "
                        "a REST API, then deploy it with Docker. Want some project ideas?"),
        ],
    ),
    (
        "Job Search Strategy Discussion",
        [
            (USER, "I've been applying to software engineering jobs but not getting many responses. "
                   "How can I improve my resume and application strategy?"),
            (ASSISTANT, "A few things usually make the biggest difference:\n\n"
                        "**Resume:** quantify achievements, mirror keywords from the job description, "
                        "keep it to one page, and link your GitHub and portfolio.\n"
                        "**Applications:** apply consistently, tailor each application, and apply "
                        "within a day or two of the posting.\n"
                        "**Networking:** meetups, LinkedIn, and informational interviews.\n\n"
                        "Are you getting any interviews at all?"),
            (USER, "I'm a recent computer science graduate with some personal projects. I've had a few "
                   "phone screens but no technical interviews yet. How can I improve my chances?"),
            (ASSISTANT, "Phone screens mean your resume is working. To convert them:\n\n"
                        "- Research the company and prepare two or three questions about the team\n"
                        "- Practice explaining your projects in two minutes\n"
                        "- Deploy your projects and write clear READMEs with tests\n"
                        "- Send a short thank-you note and ask about next steps\n\n"
                        "Would you like feedback on one of your projects?"),
        ],
    ),
    (
        "Technical Interview Prep",
        [
            (USER, "I have a technical interview next week for a backend developer position. "
                   "Can you help me prepare for system design questions?"),
            (ASSISTANT, "Sure. The core concepts to review are scaling, load balancing, caching, "
                        "SQL vs NoSQL trade-offs, replication and sharding, and message queues.\n\n"
                        "In the interview, clarify requirements first, sketch the high-level design, "
                        "talk through trade-offs, and cover failure modes.\n\n"
                        "Let's practice: how would you design a basic URL shortener?"),
            (USER, "For a URL shortener, I'd need a way to generate short codes and store the mapping. "
                   "I'm thinking of using a hash function to create short URLs. Is that the right approach?"),
            (ASSISTANT, "Hashing works but collisions need handling. Common options:\n\n"
                        "- **Hash-based:** truncate a hash and retry on collision\n"
                        "- **Counter-based:** auto-increment ID encoded in base62\n"
                        "- **Random:** 6-8 random characters with a uniqueness check\n\n"
                        "Put a cache in front of the lookup table, add rate limiting, and think about "
                        "expiration. How would you handle millions of new URLs per day?"),
        ],
    ),
]

# Extra sessions for individual users, keyed by demo user id
EXTRA_CONVERSATIONS = {
    "demo_alice_johnson": (
        "Career Transition from Marketing to Tech",
        [
            (USER, "I've been working in marketing for 5 years but want to transition to tech. "
                   "What's the best path forward?"),
            (ASSISTANT, "Your marketing background is an asset. Paths that build on it include "
                        "product management, marketing technology, data analysis, technical writing "
                        "and sales engineering.\n\nPick one, take a focused course, build a small "
                        "project, and talk to people already in the role. What excites you most?"),
        ],
    ),
    "demo_bob_smith": (
        "Remote Work vs Office Work",
        [
            (USER, "I'm considering whether to work remotely or in an office. "
                   "What are the key differences for tech careers?"),
            (ASSISTANT, "Remote work gives flexibility, no commute and access to more companies. "
                        "Office work makes mentorship and spontaneous collaboration easier.\n\n"
                        "Early in your career, in-person or hybrid usually speeds up learning; "
                        "remote tends to work better once you are more experienced. "
                        "What's your current experience level?"),
        ],
    ),
    "demo_carol_davis": (
        "Salary Negotiation Tips",
        [
            (USER, "I just got a job offer for my first tech position! The salary is $75k. "
                   "How should I approach negotiation?"),
            (ASSISTANT, "Congratulations! Start by researching comparable roles on Glassdoor and "
                        "Levels.fyi, and look at total compensation, not just base salary.\n\n"
                        "Open with enthusiasm, then make a specific, data-backed request, for example "
                        "'similar roles in this area pay $80-85k'. If base is firm, ask about a signing "
                        "bonus, extra vacation or a learning budget. What's the role and location?"),
        ],
    ),
}


def _create_conversation(user_id: str, title: str, turns) -> ChatSession:
    session = chat_service.create_session(user_id, title)
    for role, content in turns:
        chat_service.add_message(user_id, session.id, role, content)
    return session


@transaction.atomic
def seed_demo_data(reset: bool = True) -> Dict[str, int]:
    """
    Populate the database with demo users and career conversations.

    Args:
        reset: Delete the demo users (and, by cascade, their sessions and
            messages) before seeding

    Returns:
        Counts of created users, sessions and messages
    """
    User = get_user_model()
    demo_ids = [u["id"] for u in DEMO_USERS]

    if reset:
        deleted, _ = User.objects.filter(id__in=demo_ids).delete()
        logger.info(f"Removed existing demo data ({deleted} rows)")

    counts = {"users": 0, "sessions": 0, "messages": 0}

    for data in DEMO_USERS:
        user = User.objects.filter(id=data["id"]).first()
        if user is None:
            user = User.objects.create_user(id=data["id"], email=data["email"], name=data["name"])
            counts["users"] += 1

        conversations = list(SHARED_CONVERSATIONS)
        if user.id in EXTRA_CONVERSATIONS:
            conversations.append(EXTRA_CONVERSATIONS[user.id])

        for title, turns in conversations:
            _create_conversation(user.id, title, turns)
            counts["sessions"] += 1
            counts["messages"] += len(turns)

    logger.info(
        f"Seeded {counts['users']} users, {counts['sessions']} sessions, "
        f"{counts['messages']} messages"
    )
    return counts
