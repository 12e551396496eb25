import os

import setuptools

from sound_session import __version__


def read(fname):
   return open(os.path.join(os.path.dirname(__file__), fname)).read()

setuptools.setup(
   name='sound-session',
   version=__version__,
   description='Sound board session: play a bundled clip, stream a remote sound and record the microphone',
   long_description=read('README.md'),
   long_description_content_type="text/markdown",
   license="BSD2",
   keywords="sound player recorder",
   packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
   package_data={
      'sound_session': ['assets/sfx/*.wav'],
   },
   install_requires=[
      'krozark-current-platform',
      'numpy',
      'soundfile',
      'sounddevice',
      'httpx',
   ],
   extras_require={
      'android': ['pyjnius'],
      'test': ['pytest', 'pytest-asyncio'],
   },
   entry_points={
      'console_scripts': [
         'sound-session=sound_session.cli:main',
      ],
   },
   classifiers=[
      "Programming Language :: Python",
      "Programming Language :: Python :: 3",
      "Operating System :: OS Independent",
    ],
   python_requires='>=3.10',
)
