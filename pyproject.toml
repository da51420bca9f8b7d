[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicekit"
version = "0.1.0"
description = "Small worked programming exercises: algorithms, data structures, parsers, concurrency and networking."
requires-python = ">=3.10"
keywords = [
    "exercises",
    "education",
    "protobuf",
    "binary-tree",
    "dining-philosophers",
    "link-checker",
    "websocket-chat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "requests",
    "beautifulsoup4",
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "responses",
]

[project.scripts]
practicekit-collatz = "practicekit.collatz:main"
practicekit-fib = "practicekit.fibonacci:main"
practicekit-transpose = "practicekit.matrix:main"
practicekit-vectors = "practicekit.vectors:main"
practicekit-packages = "practicekit.packages:main"
practicekit-verbosity = "practicekit.verbosity:main"
practicekit-widgets = "practicekit.widgets:main"
practicekit-counter = "practicekit.counter:main"
practicekit-elevator = "practicekit.elevator:main"
practicekit-listdir = "practicekit.listdir:main"
practicekit-tasks = "practicekit.tasks:main"
practicekit-philosophers = "practicekit.philosophers:main"
practicekit-async-philosophers = "practicekit.async_philosophers:main"
practicekit-chat-server = "practicekit.chat_server:main"
practicekit-chat-client = "practicekit.chat_client:main"
practicekit-link-checker = "practicekit.link_checker:main"

[tool.hatch.build.targets.wheel]
packages = ["practicekit"]

[tool.hatch.build.targets.sdist]
include = ["practicekit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
