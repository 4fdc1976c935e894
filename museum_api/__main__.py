from museum_api.main import run

run()
