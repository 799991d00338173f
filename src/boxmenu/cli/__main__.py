from boxmenu.cli import app

app()
