"""Setup configuration for rrparse."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the contents of README file
current_directory = Path(__file__).parent
long_description = (current_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="rrparse",
    version="0.1.0",
    description="Parse RFC 5545 recurrence strings (RRULE, RDATE, EXRULE, EXDATE) into dateutil rules",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Cugniere",
    packages=find_packages(exclude=["tests", "*.tests", "*.tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "dev": [
            "black>=25.9.0",
            "pytest>=8.4.2",
        ],
    },
    entry_points={
        "console_scripts": [
            "rrparse=rrparse.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Office/Business :: Scheduling",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="rrule rrulestr recurrence ical rfc5545 parser",
)
