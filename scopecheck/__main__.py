from scopecheck.cli import run

run()
