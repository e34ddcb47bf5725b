from music_importer.main import main

main()
