"""Startup opportunities source.

Stands in for job-board integrations (AngelList/Wellfound style listings).
"""

from __future__ import annotations

from .base import StaticSource


class StartupSource(StaticSource):
    """Internships, early-stage roles and hackathons at startups."""

    name = "Startup Opportunities"
    category = "startup"
    source_label = "startup-scraper"

    payload = (
        {
            "title": "Frontend Developer Intern - EdTech Startup",
            "description": (
                "Join a fast-growing EdTech startup building the future of online learning. "
                "Work directly with founders and gain equity experience."
            ),
            "organization": "LearnFast Technologies",
            "category": "startup",
            "location": "San Francisco, CA",
            "isRemote": True,
            "compensation": "paid",
            "requirements": ["JavaScript experience", "Portfolio of web projects"],
            "skills": ["React", "TypeScript", "CSS"],
            "tags": ["edtech", "internship", "frontend"],
            "contactEmail": "hiring@learnfast.com",
            "deadlineDays": 30,
            "estimatedHours": 30,
            "duration": "summer",
        },
        {
            "title": "Hackathon Challenge - FinTech Innovation",
            "description": (
                "$10,000 prize pool for best FinTech solution. Winning teams get fast-track "
                "interviews with top FinTech companies."
            ),
            "organization": "FinTech Innovators Hackathon",
            "category": "startup",
            "location": "New York, NY",
            "isRemote": False,
            "compensation": "paid",
            "skills": ["Rapid Prototyping", "Pitching"],
            "tags": ["hackathon", "fintech"],
            "contactEmail": "team@fintechhack.com",
            "deadlineDays": 21,
            "estimatedHours": 48,
            "duration": "one-time",
        },
        {
            "title": "Product Management Intern",
            "description": (
                "Join a fast-growing fintech startup as a Product Management Intern. Work "
                "directly with founders to shape product strategy and user experience."
            ),
            "organization": "TechFlow Startup",
            "category": "startup",
            "location": "San Francisco, CA",
            "isRemote": True,
            "compensation": "paid",
            "requirements": ["Business or Computer Science background", "Analytical thinking", "User empathy"],
            "skills": ["Product Strategy", "User Research", "Data Analysis"],
            "tags": ["product", "fintech", "internship"],
            "applicationUrl": "https://wellfound.com/jobs",
            "source": "startup-directory",
            "deadlineDays": 45,
            "estimatedHours": 30,
            "duration": "semester",
        },
        {
            "title": "Software Engineer - Early Stage Startup",
            "description": (
                "Join the team as the third engineer at an early-stage startup building "
                "developer tools. Direct impact on the product from day one."
            ),
            "organization": "DevTools Inc",
            "category": "startup",
            "location": "Remote",
            "isRemote": True,
            "compensation": "equity",
            "requirements": ["Strong programming skills", "Startup mindset", "Full-stack experience"],
            "skills": ["React", "Node.js", "PostgreSQL"],
            "tags": ["engineering", "early-stage", "remote"],
            "applicationUrl": "https://wellfound.com/jobs",
            "source": "startup-directory",
            "deadlineDays": 30,
            "estimatedHours": 40,
            "duration": "ongoing",
        },
    )
