from riot_api.presentation.cli import run

run()
