from hope import run

run()
