# setup.py
from setuptools import setup, find_packages

setup(
    name="url_scout",
    version="0.1.0",
    description="Извлечение и классификация URL из HTML-атрибутов",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"url_scout.report": ["templates/*.j2"]},
    install_requires=[
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": ["url-scout=url_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
