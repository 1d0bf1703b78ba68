from users_cli.menu import main

main()
