"""Campus research source.

Curated lab openings. A production connector would scrape university job
boards or the NSF REU listings; the payload shape here is what such a scraper
would emit before normalization.
"""

from __future__ import annotations

from .base import StaticSource


class ResearchSource(StaticSource):
    """Research assistant and lab volunteer positions."""

    name = "Campus Research"
    category = "research"
    source_label = "campus"

    payload = (
        {
            "title": "Undergraduate Research Assistant - AI Lab",
            "description": (
                "Join our cutting-edge AI research lab working on natural language processing. "
                "Perfect for Computer Science students interested in machine learning."
            ),
            "organization": "University AI Research Lab",
            "category": "research",
            "location": "Campus",
            "isRemote": False,
            "compensation": "stipend",
            "requirements": ["Computer Science major", "Programming experience", "GPA 3.0+"],
            "skills": ["Python", "Machine Learning", "Research Methods"],
            "tags": ["ai", "nlp", "undergraduate"],
            "contactEmail": "ailab@university.edu",
            "deadlineDays": 60,
            "estimatedHours": 20,
            "duration": "semester",
        },
        {
            "title": "Psychology Lab Research Volunteer",
            "description": (
                "Help conduct behavioral studies and data analysis. "
                "Great for Psychology majors looking to gain research experience."
            ),
            "organization": "Behavioral Psychology Department",
            "category": "research",
            "location": "Campus",
            "isRemote": False,
            "compensation": "academic-credit",
            "requirements": ["Psychology major", "Attention to detail"],
            "skills": ["Data Analysis", "Experimental Design"],
            "tags": ["psychology", "behavioral-science"],
            "contactEmail": "psych.lab@university.edu",
            "deadlineDays": 30,
            "estimatedHours": 10,
            "duration": "semester",
        },
        {
            "title": "Undergraduate Research Assistant - Computer Science",
            "description": (
                "Work on machine learning projects with a university lab. Gain hands-on "
                "experience with neural networks and co-author research papers."
            ),
            "organization": "University Research Lab",
            "category": "research",
            "location": "Various Universities",
            "isRemote": True,
            "compensation": "stipend",
            "requirements": ["Computer Science major", "Programming experience", "GPA 3.0+"],
            "skills": ["Python", "Machine Learning", "Research Methods"],
            "tags": ["ai", "machine-learning", "undergraduate"],
            "applicationUrl": "https://www.nsf.gov/crssprgm/reu/",
            "source": "university-labs",
            "deadlineDays": 60,
            "estimatedHours": 20,
            "duration": "semester",
        },
    )
