# rostering/cli/__init__.py
