from esddrop.cli import main

main()
