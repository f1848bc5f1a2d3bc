from skullboard.adapters.discord.launcher import main

main()
