"""User interface layers for mdxsmith."""
