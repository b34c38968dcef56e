from dynamo_users.cli import main

main()
