from mediflow.main import run

run()
