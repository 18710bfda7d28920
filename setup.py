"""Setup configuration for release_dashboard"""

from setuptools import setup, find_packages

setup(
    name="release-frequency-dashboard",
    version="0.1.0",
    description=(
        "CLI tool that turns merged GitHub pull requests into a static "
        "release frequency dashboard."
    ),
    author="Release Frequency Dashboard Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "release_dashboard": ["templates/*"],
    },
    install_requires=[
        "Jinja2>=3.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "release-dashboard=release_dashboard.main:main",
        ],
    },
)
