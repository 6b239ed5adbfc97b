"""Package build script"""
import os
import re
import setuptools

ver_file = f'localenu{os.sep}_version.py'
__version__ = None

# Pull package version number from _version.py
with open(ver_file, 'r') as f:
    for line in f.readlines():
        if re.match(r'^\s*#', line):  # comment
            continue

        verstr = re.match(r"^__version__\s*=\s*'v?(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)'", line)
        if verstr is not None:
            __version__ = verstr.group(1)
            break

    if __version__ is None:
        raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="localenu",
    version=__version__,
    author="",
    author_email="",
    description="Geodetic, ECEF and local East-North-Up coordinate conversions on the WGS84 ellipsoid.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('localenu*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"localenu": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.21',
    ],
    extras_require={
        'test': ['pytest', 'pyproj'],
    },
)
