from create_magic_app.pipeline import main

main()
