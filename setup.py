from glob import glob
from setuptools import setup


setup(
    name='scicalc',
    use_scm_version={
        # Building from an export with no VCS metadata.
        'fallback_version': '0.1.0',
    },
    description='Scientific calculator expression engine',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    python_requires='>=3.11',
    packages=['scicalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
