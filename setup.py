"""AppFormat"""

from pathlib import Path

from setuptools import setup, find_packages

here = Path(__file__).parent
requirements = (here / "requirements.txt").read_text().strip().split("\n")

setup(
    name="AppFormat",
    version="0.1.dev0",
    description="Serialize records to and from the flat 'Name: value' Application format.",
    packages=find_packages(exclude=["doc", "tests", "tmp"]),
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
)
