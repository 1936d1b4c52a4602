"""
Test framework
Inspired by some testing frameworks in Javascript. Very simple and extendible.

Tests are grouped: a function decorated with `@prepare` sets up the fixtures and defines the
tests as nested functions decorated with `@test`. A test file can be run as a script with
`run_tests()`. The preparation functions are named `test_*`, so pytest runs each group as one test.
"""

import logging
import sys
from contextlib import contextmanager
from fnmatch import fnmatch
from functools import wraps

all_tests = []
executed_tests = []
preparations = []
cleanups = []

def test(func):
    all_tests.append(func)
    return func
# The decorator itself is not a test.
test.__test__ = False

@contextmanager
def expect_exception(e):
    success = False
    try:
        yield None
    except e:
        success = True
    assert success, f"Code did not raise an exception of type {e.__name__}"

def run_group(p, test_filters=None):
    """ Run a single preparation and the tests it defines. Returns the names of the failed tests. """
    global all_tests, cleanups
    failures = []
    all_tests = []
    cleanups = []
    p.preparation()

    for t in all_tests:
        if test_filters and not any(fnmatch(t.__name__, f) for f in test_filters):
            continue
        name = p.__module__ + '.' + p.__name__ + '.' + t.__name__
        print(f"Running test {name}")
        try:
            t()
        except Exception:
            logging.exception(f'Test failed: {name}')
            failures.append(name)
        executed_tests.append(name)

    # Cleanup is in reversed order, hopefully keeping dependencies alive while needed.
    for c in reversed(cleanups):
        c()
    return failures

def prepare(func):
    @wraps(func)
    def group():
        failures = run_group(group)
        assert not failures, f"Failed tests: {', '.join(failures)}"
    group.preparation = func
    preparations.append(group)
    return group

def cleanup(func):
    cleanups.append(func)
    return func

def run_tests(*filters):
    failures = []

    filters = [f.split('.') for f in filters]

    for p in preparations:
        if filters:
            if not any(fnmatch(p.__name__, f[0]) for f in filters):
                continue
            test_filters = [f[1] for f in filters if len(f) > 1 and fnmatch(p.__name__, f[0])]
        else:
            test_filters = []

        print(f"Preparing: {p.__name__} in {p.__module__}")
        failures.extend(run_group(p, test_filters))

    logging.error(f"Failures: {len(failures)} / {len(executed_tests)}")
    if failures:
        for failure in failures:
            logging.error(f"Test {failure} FAILED")
        sys.exit(1)
