from folderzipper.cli import main

main()
