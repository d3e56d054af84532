from setuptools import setup

setup(
    name='id-obfuscator',
    version='1.0',
    description='Reversible, profile-based obfuscation of numeric IDs built on hashids.',
    python_requires='>=3.9',
    py_modules=[
        'active_config',
        'app',
        'batch',
        'commands',
        'config',
        'core_logic',
        'encoding',
        'limiter',
        'models',
        'profiles',
        'router',
        'text_processor',
        'validation',
    ],
    install_requires=[
        'fastapi',
        'pydantic>=2',
        'hashids',
        'slowapi',
    ],
    extras_require={
        'test': ['pytest', 'httpx'],
    },
)
