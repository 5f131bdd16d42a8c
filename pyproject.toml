[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fusionahrs"
version = "1.0.0"
description = "Sensor fusion AHRS: gyroscope, accelerometer and magnetometer fused into orientation relative to the Earth"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ahrs",
    "imu",
    "sensor fusion",
    "orientation",
    "quaternion",
    "gyroscope",
    "accelerometer",
    "magnetometer",
    "compass",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fusionahrs-example = "fusionahrs.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["fusionahrs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
