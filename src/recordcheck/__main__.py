from recordcheck.cli import main

main()
