from recobj.cmdline import main

main()
