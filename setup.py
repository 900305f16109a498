from setuptools import setup
import os


# read the contents of your README file
path = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(path, 'README.md'), encoding='utf-8') as fd:
    long_description = fd.read()


setup(
    name='pyydecode',
    version='1.0.0',
    description='yEnc decoder (including multi-part files)',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Byron Platt',
    author_email='byron.platt@gmail.com',
    license='GPL3',
    packages=['ydecode'],
    install_requires=[],
    extras_require={'test': ['pytest']},
    python_requires='>=3.9',
)
