from hmlevels.cmdline import main

main()
