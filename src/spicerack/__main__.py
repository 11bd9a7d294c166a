from spicerack.cli import main

main()
