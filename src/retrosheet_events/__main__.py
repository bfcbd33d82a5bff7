from retrosheet_events.cli.app import app

app()
