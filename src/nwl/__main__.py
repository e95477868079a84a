from nwl.cli import main

main()
