from glob import glob
from setuptools import setup


setup(
    name='rpncalc',
    use_scm_version={'fallback_version': '0.1.0'},
    description='Terminal RPN calculator with undo',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    python_requires='>=3.6',
    packages=['rpncalc'],
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
