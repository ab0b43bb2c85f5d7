"""Student organization source.

In the web app these are user-submitted or scraped from campus sites.
"""

from __future__ import annotations

from .base import StaticSource


class StudentOrgSource(StaticSource):
    """Leadership and project roles in campus organizations."""

    name = "Student Organizations"
    category = "student-org"
    source_label = "user-submitted"

    payload = (
        {
            "title": "Marketing Director - Entrepreneurship Club",
            "description": (
                "Lead marketing efforts for our 500+ member entrepreneurship club. Plan "
                "events, manage social media, and build partnerships."
            ),
            "organization": "Student Entrepreneurship Club",
            "category": "student-org",
            "location": "Campus",
            "isRemote": False,
            "compensation": "unpaid",
            "skills": ["Marketing", "Social Media", "Event Planning"],
            "tags": ["leadership", "entrepreneurship"],
            "contactEmail": "leadership@eclub.university.edu",
            "duration": "semester",
        },
        {
            "title": "Tech Lead - Student App Development",
            "description": (
                "Lead a team of student developers building apps for campus life. Previous "
                "project had 2,000+ downloads."
            ),
            "organization": "Campus App Developers",
            "category": "student-org",
            "location": "Campus",
            "isRemote": True,
            "compensation": "unpaid",
            "skills": ["Mobile Development", "Team Leadership"],
            "tags": ["leadership", "mobile", "apps"],
            "contactEmail": "techlead@campusapps.university.edu",
            "duration": "semester",
        },
        {
            "title": "Hackathon Event Coordinator",
            "description": (
                "Help organize the annual campus hackathon. Coordinate with sponsors, manage "
                "logistics, and support participants during the 48-hour event."
            ),
            "organization": "Computer Science Student Association",
            "category": "student-org",
            "location": "Campus Events Center",
            "isRemote": False,
            "compensation": "academic-credit",
            "requirements": ["Event planning interest", "Strong organizational skills"],
            "skills": ["Event Planning", "Team Coordination", "Vendor Management"],
            "tags": ["hackathon", "technology", "leadership"],
            "contactEmail": "hackathon@university.edu",
            "source": "campus-orgs",
            "deadlineDays": 21,
            "estimatedHours": 25,
            "duration": "one-time",
        },
        {
            "title": "Peer Career Advisor",
            "description": (
                "Provide career guidance to fellow students, help with resume reviews, and "
                "facilitate networking events with industry professionals."
            ),
            "organization": "Career Development Club",
            "category": "student-org",
            "location": "Career Services Office",
            "isRemote": False,
            "compensation": "academic-credit",
            "requirements": ["Junior/Senior status", "Interpersonal skills"],
            "skills": ["Career Counseling", "Resume Review", "Networking"],
            "tags": ["career", "advising", "peer-support"],
            "applicationUrl": "https://careers.university.edu/peer-advisor",
            "source": "career-services",
            "deadlineDays": 14,
            "estimatedHours": 10,
            "duration": "semester",
        },
    )
