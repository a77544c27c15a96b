from figures.conf import get_setting


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Fenced code blocks must keep their language class
    (fenced_code_attributes) for the diagram renderers to find them.
    Override the arguments with the FIGURES_PANDOC_EXTRA_ARGS setting.
    """
    return {
        "extra_args": list(get_setting("FIGURES_PANDOC_EXTRA_ARGS")),
        "filters": [],
    }
