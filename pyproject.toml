[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shadkit"
version = "0.1.0"
description = "Tailwind-styled UI components rendered to HTML, with small state helpers and a demo gallery"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "components", "tailwind", "html"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shadkit = "shadkit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shadkit"]

[tool.pytest.ini_options]
addopts = "-ra"
