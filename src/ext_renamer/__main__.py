from ext_renamer.cli import main

main()
