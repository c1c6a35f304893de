from mdxsmith.ui.cli import main


main()
