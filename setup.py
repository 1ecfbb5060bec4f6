from setuptools import setup, find_packages

setup(
    name="terminal-ai",
    version="0.1.0",
    description="Shell adapter that turns a natural-language request into a single command suggestion via the Gemini API",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    install_requires=[
        "httpx>=0.27.0",
        "python-dotenv>=1.0.0",
        "typer>=0.12.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "terminal-ai=terminal_ai.main:terminal_ai",
        ],
    },
    python_requires=">=3.10",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
