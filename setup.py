from setuptools import setup, find_packages
import codecs
import os

here = os.path.abspath(os.path.dirname(__file__))

with codecs.open(os.path.join(here, "README.md"), encoding="utf-8") as fh:
    long_description = "\n" + fh.read()

VERSION = "0.1.0"
DESCRIPTION = "Split timestamped GPS points into trips by time gap and distance jump, and export them as GeoJSON with distance, duration and speed."

# Setting up
setup(
    name="trips_segmentation",
    version=VERSION,
    author="Ian dos Anjos Melo Aguiar",
    author_email="<iannaianjos@gmail.com>",
    description=DESCRIPTION,
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=["pandas>=2.0", "numpy", "numba"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["trips-geojson=trips_segmentation.cli:main"]},
    keywords=["python", "gps", "trips", "geojson"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Operating System :: Unix",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
    ]
)
