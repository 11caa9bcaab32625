[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2015"
version = "1.0.0"
description = "Solvers for the 2015 holiday puzzle calendar, days 12 to 25"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "2015", "solver"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2015-day12 = "advent2015.day12_abacus:main"
advent2015-day13 = "advent2015.day13_dinner_table:main"
advent2015-day14 = "advent2015.day14_reindeer:main"
advent2015-day15 = "advent2015.day15_cookies:main"
advent2015-day16 = "advent2015.day16_aunt_sue:main"
advent2015-day17 = "advent2015.day17_containers:main"
advent2015-day18 = "advent2015.day18_lights:main"
advent2015-day19 = "advent2015.day19_medicine:main"
advent2015-day20 = "advent2015.day20_presents:main"
advent2015-day21 = "advent2015.day21_rpg:main"
advent2015-day22 = "advent2015.day22_wizard:main"
advent2015-day23 = "advent2015.day23_turing_lock:main"
advent2015-day24 = "advent2015.day24_balance:main"
advent2015-day25 = "advent2015.day25_snow:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2015"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
