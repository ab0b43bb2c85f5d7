"""Nonprofit volunteer source.

Placeholder for volunteer-matching APIs (VolunteerMatch, JustServe, Idealist).
"""

from __future__ import annotations

from .base import StaticSource


class NonprofitSource(StaticSource):
    """Volunteer roles with charities and civic-tech groups."""

    name = "Nonprofit Volunteers"
    category = "nonprofit"
    source_label = "nonprofit-api"

    payload = (
        {
            "title": "Web Developer for Local Food Bank",
            "description": (
                "Help modernize our food bank's website and donation system. Make a real "
                "impact in fighting hunger while building your portfolio."
            ),
            "organization": "Community Food Bank",
            "category": "nonprofit",
            "location": "Local Community",
            "isRemote": True,
            "compensation": "unpaid",
            "requirements": ["Web development basics", "Reliable commitment"],
            "skills": ["HTML", "JavaScript", "Payment Integrations"],
            "tags": ["volunteer", "social-impact", "web"],
            "contactEmail": "volunteer@foodbank.org",
            "deadlineDays": 60,
            "estimatedHours": 8,
            "duration": "ongoing",
        },
        {
            "title": "Data Analyst for Environmental Nonprofit",
            "description": (
                "Analyze climate data and create visualizations for our environmental "
                "impact reports."
            ),
            "organization": "Green Earth Initiative",
            "category": "nonprofit",
            "location": "Remote",
            "isRemote": True,
            "compensation": "unpaid",
            "requirements": ["Data analysis skills", "Environmental interest"],
            "skills": ["Data Analysis", "Visualization", "Report Writing"],
            "tags": ["environment", "data", "remote"],
            "contactEmail": "data@greenearthinitiative.org",
            "deadlineDays": 45,
            "estimatedHours": 15,
            "duration": "semester",
        },
        {
            "title": "Code for America Brigade Member",
            "description": (
                "Join your local Code for America brigade to build technology solutions for "
                "civic problems. Work with government partners to improve digital services."
            ),
            "organization": "Code for America",
            "category": "nonprofit",
            "location": "Various Cities",
            "isRemote": True,
            "compensation": "unpaid",
            "requirements": ["Programming skills", "Civic interest", "Weekend availability"],
            "skills": ["Web Development", "Data Analysis", "User Experience"],
            "tags": ["civic-tech", "volunteer", "coding"],
            "applicationUrl": "https://www.codeforamerica.org/join",
            "source": "codeforamerica",
            "deadlineDays": 90,
            "estimatedHours": 8,
            "duration": "ongoing",
        },
        {
            "title": "Youth Coding Mentor",
            "description": (
                "Teach coding skills to underserved youth in your community. Help bridge the "
                "digital divide while sharing your technical knowledge."
            ),
            "organization": "Code for Good",
            "category": "nonprofit",
            "location": "Community Centers",
            "isRemote": False,
            "compensation": "volunteer",
            "requirements": ["Programming knowledge", "Patience with youth", "Weekend availability"],
            "skills": ["Programming", "Teaching", "Mentorship"],
            "tags": ["education", "coding", "youth"],
            "applicationUrl": "https://www.volunteermatch.org/",
            "source": "local-nonprofits",
            "deadlineDays": 30,
            "estimatedHours": 5,
            "duration": "ongoing",
        },
    )
