from users_api.run import main

main()
