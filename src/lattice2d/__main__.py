from lattice2d.main import run

run()
