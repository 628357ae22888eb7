from invoke import task


@task
def lint(c):
    c.run("ruff check .")


@task
def format_check(c):
    c.run("ruff format --check .")


@task
def test(c):
    c.run("pytest")


@task
def perf(c):
    c.run("python scripts/run_performance_check.py")


@task
def ci(c):
    lint(c)
    format_check(c)
    test(c)
