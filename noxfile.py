import nox.sessions

# Nox
nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = [
    'tests',
    'tests_pydantic',
]

# Versions
PYTHON_VERSIONS = ['3.9', '3.10', '3.11', '3.12']
PYDANTIC_VERSIONS = [
    # Selective: the oldest supported, and one latest version from every minor release after it
    '2.7.4', '2.8.2', '2.9.2', '2.10.6', '2.11.7',
]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.sessions.Session, *, overrides: dict[str, str] = {}):
    """ Run all tests """
    session.install('.[test]')

    if overrides:
        session.install(*(f'{name}=={version}' for name, version in overrides.items()))

    # Test
    args = []
    if not overrides:
        args.append('--cov=expecto')

    session.run('pytest', 'tests/', *args)


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize('pydantic', PYDANTIC_VERSIONS)
def tests_pydantic(session: nox.sessions.Session, pydantic):
    """ Test against a specific Pydantic version """
    tests(session, overrides={'pydantic': pydantic})
