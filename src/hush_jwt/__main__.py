from hush_jwt.cli import main

main()
