# setup.py
from setuptools import setup, find_packages

setup(
    name="tree2fs",
    version="0.1.0",
    description="Turn ASCII-art directory trees into real files and folders",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "tree2fs": ["interface/locales/*.json"],
    },
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tree2fs=tree2fs.main:main',
            't2f=tree2fs.main:main',  # Short alias
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
