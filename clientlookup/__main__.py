from .run_lookup import main

main()
