#!/usr/bin/env python3
"""
Setup script for Soundfonter

    pip install -e .[test]       development install
    python setup.py py2app       Mac app bundle (requires py2app)
"""

from setuptools import setup, find_namespace_packages

APP = ['soundfonter/main.py']

OPTIONS = {
    'argv_emulation': True,
    'iconfile': None,
    'site_packages': True,
    'plist': {
        'CFBundleName': 'Soundfonter',
        'CFBundleDisplayName': 'Soundfonter',
        'CFBundleIdentifier': 'app.soundfonter.Soundfonter',
        'CFBundleVersion': '1.0.0',
        'CFBundleShortVersionString': '1.0.0',
        'CFBundleInfoDictionaryVersion': '6.0',
        'LSMinimumSystemVersion': '10.15',
        'NSHighResolutionCapable': True,
        'NSRequiresAquaSystemAppearance': False,
    },
    'packages': ['PySide6', 'soundfonter'],
    'includes': [
        'soundfonter.ui.main_window',
        'soundfonter.ui.sidebar_widget',
        'soundfonter.ui.collection_widget',
    ],
    'excludes': [
        'tkinter',
        'matplotlib',
        'scipy',
        'IPython',
        'PIL'
    ],
}

setup(
    name='Soundfonter',
    version='1.0.0',
    description='Library manager for converted soundfont instrument collections',
    packages=find_namespace_packages(include=['soundfonter', 'soundfonter.*']),
    python_requires='>=3.9',
    app=APP,
    options={'py2app': OPTIONS},
    install_requires=[
        'PySide6>=6.5.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'gui_scripts': [
            'soundfonter=soundfonter.main:main',
        ],
    },
)
