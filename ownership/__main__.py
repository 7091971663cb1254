from ownership.cli import main

main(prog_name="ownership")
