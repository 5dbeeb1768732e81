[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kitbag"
version = "0.1.0"
description = "Small tools and helper classes: containers, a PCF font inspector, a largest-file finder, a zlib pipe, Life, a path puzzle and a tiny TCP chat."
requires-python = ">=3.10"
keywords = ["utilities", "pcf", "fonts", "zlib", "game-of-life", "chat", "containers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pcfont = "kitbag.pcf_cli:main"
large = "kitbag.largest:main"
zpipe = "kitbag.zpipe:main"
upcase = "kitbag.upcase:main"
netstat-report = "kitbag.netstat:main"
chemical = "kitbag.chemical:main"
kitbag-chat = "kitbag.chat:main"

[tool.hatch.build.targets.wheel]
packages = ["kitbag"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
