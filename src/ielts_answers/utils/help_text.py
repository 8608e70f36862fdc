from rich.console import Console
from rich.markdown import Markdown

console = Console()

def show_help_with_markdown(ctx, param, value):
    """Custom help callback that renders help text using Rich markdown"""
    if not value or ctx.resilient_parsing:
        return

    markdown_help = """
# ielts - IELTS Answer Checker

## 🚀 QUICK START EXAMPLES

```bash
ielts check "5km" "5 kilometres"
ielts check "B,A" "A,B" --type MULTIPLE_CHOICE_MULTIPLE
ielts grade key.json answers.json --module listening
ielts band 30 --module academic_reading
ielts overall 6.5 6.5 5.0 7.0
```

## 💡 TIP
- Use `ielts COMMAND --help` for detailed options on any command.
- Separate acceptable alternatives with `/` and multi-select options with `,`.

## Options
- `--config, -c PATH`: Configuration file path
- `--verbose, -v`: Enable verbose logging
- `--debug`: Enable debug mode
- `--help`: Show this message and exit

## Commands
- check    Check a learner answer against the correct answer.
- grade    Grade a section against its answer key.
- band     Convert a raw score into a band score.
- overall  Calculate the overall band from the four module bands.
- config   Configuration management commands.
"""

    console.print(Markdown(markdown_help))
    ctx.exit()
