from clean_scaffold.pipeline import main

main()
