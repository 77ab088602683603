from setuptools import find_packages, setup

setup(
    name="pagerduty-rest",
    version="0.1.0",
    license="Apache License 2.0",

    python_requires=">=3.12",
    description="Typed client for the PagerDuty REST API v2 with httpx and "
                "Pydantic models.",

    packages=find_packages(exclude=('tests', 'tests.*')),

    install_requires=[
        "httpx>=0.27,<1.0",
        "pydantic~=2.7",
        "pydantic-settings~=2.3",
        "structlog>=24.1",
        "prometheus-client~=0.20",
        "python-json-logger~=3.1",
    ],

    extras_require={
        "test": [
            "pytest~=8.0",
        ],
    },

    test_suite="tests",

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.12',
    ],
)
