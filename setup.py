from setuptools import setup, find_packages

setup(
    name="angstrom_scd_desktop",
    version="1.0.0",
    packages=find_packages(include=["command_proxy", "command_proxy.*", "desktop", "desktop.*", "models", "models.*"]),
    install_requires=[
        "anyio",
        "httpx",
        "pydantic>=2",
        "python-dotenv",
        "pywebview",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "angstrom-desktop=desktop.app:main",
        ],
    },
)
