from setuptools import setup, find_packages

setup(
    name='graph-visual-mapping',
    version='1.0.0',
    description='Visual mapping engine for weighted graphs (size, color, legend, backend schemas)',
    packages=find_packages(include=['mapping_api', 'mapping_api.*',
                                    'visual_mapping', 'visual_mapping.*']),
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'graph-visual-mapping = visual_mapping.cli:main',
        ],
    },
    python_requires='>=3.8',
)
