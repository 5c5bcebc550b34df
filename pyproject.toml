[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svgraster"
version = "0.1.0"
description = "Rasterize a small subset of SVG (ellipses, circles, lines, polylines, polygons, rectangles, groups) to PNG"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["svg", "png", "raster", "bresenham", "converter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
svgtopng = "svgraster.convert:main"
xmldump = "svgraster.xmldump:main"
svgraster-test = "svgraster.testdriver:main"

[tool.hatch.build.targets.wheel]
packages = ["svgraster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
