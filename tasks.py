import invoke


@invoke.task()
def test_run(ctx: invoke.Context):
    ctx.run("pytest --cov=narigama_optional --cov-report=term-missing --cov-report=xml:coverage.xml")


@invoke.task()
def build(ctx: invoke.Context):
    ctx.run("python -m build")
