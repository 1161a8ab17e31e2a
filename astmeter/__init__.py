"""
astmeter: AST complexity metrics and graph rendering for a single source file.

astmeter parses one source file, walks its syntax tree, and reports:
- Cyclomatic complexity (decision points + 1)
- A heuristic time complexity, O(n^k) for k nested loops
- A heuristic space indicator from the number of variable declarations

The tree is also emitted as a Graphviz graph and rendered to an image.

Usage:
    from astmeter.core.analyzer import analyze_file
    from astmeter.core.report import format_report

    result = analyze_file(Path("main.c"))
    for line in format_report(result.metrics):
        print(line)
"""

__version__ = "0.1.0"
