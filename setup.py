"""setuptools packaging for studytimer.

Install for development:
    pip install -e ".[test]"
    pytest
"""

from setuptools import setup, find_packages

setup(
    name="studytimer",
    version="0.1.0",
    description="Study session timer engine with Pomodoro-style cycles",
    packages=find_packages(include=["studytimer", "studytimer.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
)
