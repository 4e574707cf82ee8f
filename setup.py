import setuptools

setuptools.setup(
    name='globkit',
    packages=setuptools.find_packages(exclude=['tests']),
    version='0.1.0',
    author='globkit contributors',
    description='Wildcard matching for strings and slash-separated paths',
    long_description=open('README.md', 'r').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.7',
    install_requires=[
        'pyperclip',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
