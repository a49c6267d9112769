[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golings"
version = "0.1.0"
description = "Learn Go through small interactive exercises that you fix until they compile and pass"
requires-python = ">=3.11"
keywords = ["go", "golang", "learning", "exercises", "education", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "click>=8.1",
    "watchdog>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[project.scripts]
golings = "golings.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["golings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
