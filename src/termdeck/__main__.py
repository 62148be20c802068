from termdeck.web.app import main

main()
