from ansipix.cli import main

main()
