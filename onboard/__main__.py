from onboard.run_all import main

main()
