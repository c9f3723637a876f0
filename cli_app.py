#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
WordIndex - CLI Interface
Command-line interface for building the word index and running TF-IDF queries
"""

import os
import sys
import time
import argparse
from typing import List, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn
from rich import box

from WordIndex.config import load_config
from WordIndex.preprocessing.document import load_collection
from WordIndex.tfidf_search.tfidf_search import TFIDFSearchEngine

# Initialize rich console
console = Console()

class WordIndexCLI:
    def __init__(self, config=None):
        """Initialize the CLI interface"""
        self.config = config or load_config()
        self.engine = None
        self.collection_file = None

    @property
    def collection_loaded(self) -> bool:
        return self.engine is not None

    def print_header(self):
        """Display the application header"""
        console.print(Panel(
            "[bold blue]WordIndex[/bold blue] [yellow]TF-IDF Search[/yellow]",
            border_style="blue",
            subtitle="Inverted index over a document collection",
            width=80
        ))

    def load_collection(self, collection_file: str) -> bool:
        """Load and index every document listed in a collection file"""
        console.print(f"Loading collection from: [cyan]{collection_file}[/cyan]")

        try:
            documents, skipped = load_collection(collection_file)
        except OSError as e:
            console.print(f"[bold red]Error loading collection:[/bold red] {str(e)}")
            return False

        engine = TFIDFSearchEngine(config=self.config)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TimeElapsedColumn(),
            console=console
        ) as progress:
            task = progress.add_task("Building index...", total=len(documents))
            for document in documents:
                engine.builder.index_document(document)
                progress.advance(task)

        engine.builder.skipped.extend(skipped)
        self.engine = engine
        self.collection_file = collection_file

        console.print(f"[green]Indexed [bold]{engine.document_count}[/bold] documents, "
                      f"[bold]{len(engine.tree)}[/bold] distinct words[/green]")
        if skipped:
            console.print(f"[yellow]Skipped {len(skipped)} unreadable document(s): "
                          f"{', '.join(skipped)}[/yellow]")
        return True

    def search(self, query: str, top_k: int = None) -> List[Tuple[str, float]]:
        """Perform a TF-IDF search"""
        if not self.engine:
            console.print("[bold red]No collection loaded.[/bold red]")
            return []

        console.print(f"Executing TF-IDF search: '[cyan]{query}[/cyan]'")

        start_time = time.time()
        results = self.engine.search(query, top_k=top_k)
        execution_time = time.time() - start_time

        console.print(f"[green]Found {len(results)} documents in {execution_time:.6f} seconds[/green]")
        return results

    def display_results(self, results):
        """Display search results in a formatted way"""
        if not results:
            console.print("[yellow]No results found.[/yellow]")
            return

        timestamp = time.strftime("%H:%M:%S")
        console.print(f"\n[bold cyan]TF-IDF SEARCH RESULTS [dim]({timestamp})[/dim]:[/bold cyan]")

        table = Table(
            box=box.HEAVY_EDGE,
            show_header=True,
            header_style="bold magenta",
            title=f"[bold]Found {len(results)} document(s) ranked by relevance[/bold]",
            title_style="yellow"
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("Document", style="cyan bold")
        table.add_column("Score", style="yellow", justify="right")

        for i, (document, score) in enumerate(results):
            # Highlight the row for the top result
            row_style = "on blue" if i == 0 else ""
            score_str = f"{score:.7f}"
            score_display = score_str if score > 0 else f"[dim]{score_str}[/dim]"
            table.add_row(str(i + 1), document, score_display, style=row_style)

        console.print(table)

    def dump_index(self, output_file: str = None) -> bool:
        """Write the inverted index to a text file"""
        if not self.engine:
            console.print("[bold red]No collection loaded.[/bold red]")
            return False

        try:
            path = self.engine.builder.save_dump(output_file)
        except OSError as e:
            console.print(f"[bold red]Error writing index:[/bold red] {str(e)}")
            return False

        console.print(f"[green]Index written to [cyan]{path}[/cyan][/green]")
        return True

    def show_sample(self, sample_size: int = 10):
        """Display the first words of the index"""
        if not self.engine:
            console.print("[bold red]No collection loaded.[/bold red]")
            return

        precision = self.config.get("index", {}).get("tf_precision", 6)
        table = Table(title="[bold]Inverted Index Sample[/bold]", box=box.ROUNDED)
        table.add_column("Word", style="cyan")
        table.add_column("Documents (tf)", style="green", no_wrap=False)

        for i, node in enumerate(self.engine.tree):
            if i >= sample_size:
                break
            table.add_row(node.word, node.documents.format(precision))

        console.print(table)

    def show_statistics(self):
        """Display collection and index statistics"""
        if not self.engine:
            console.print("[bold red]No collection loaded.[/bold red]")
            return

        stats = self.engine.builder.statistics()
        table = Table(show_header=False, box=box.SIMPLE)
        table.add_column("Metric", style="dim")
        table.add_column("Value", style="yellow", justify="right")
        table.add_row("Collection", self.collection_file or "-")
        table.add_row("Documents", str(stats["documents"]))
        table.add_row("Skipped documents", str(stats["skipped_documents"]))
        table.add_row("Distinct words", str(stats["words"]))
        table.add_row("Tree height", str(stats["tree_height"]))

        console.print(Panel(table, title="[bold]Index Statistics[/bold]", border_style="green", expand=False))

    def interactive_mode(self):
        """Run the application in interactive mode"""
        while True:
            console.rule("[bold blue]WordIndex[/bold blue]")

            if not self.collection_loaded:
                console.print("[bold yellow]First, let's load a document collection.[/bold yellow]")
                collection_file = console.input("\n[bold cyan]Enter path to collection file: [/bold cyan]")

                if not collection_file:
                    console.print("[bold red]No collection path provided. Exiting.[/bold red]")
                    return

                if not self.load_collection(collection_file):
                    continue

            menu_table = Table(show_header=False, box=box.SIMPLE)
            menu_table.add_column("Option", style="dim")
            menu_table.add_column("Description", style="yellow")

            menu_table.add_row("1", "TF-IDF Search")
            menu_table.add_row("2", "Write Index Dump")
            menu_table.add_row("3", "Show Index Sample")
            menu_table.add_row("4", "Show Statistics")
            menu_table.add_row("5", "Quit")

            console.print("\n[bold cyan]Available Actions:[/bold cyan]")
            console.print(menu_table)

            choice = console.input("\n[bold cyan]Enter choice (1-5): [/bold cyan]")

            if choice == '5' or choice.lower() == 'quit':
                break

            if choice == '2':
                self.dump_index()
                continue

            if choice == '3':
                self.show_sample()
                continue

            if choice == '4':
                self.show_statistics()
                continue

            if choice != '1':
                console.print("[bold red]Invalid choice. Please enter a number between 1 and 5.[/bold red]")
                continue

            query = console.input("\nEnter search query: ")
            if not query.strip():
                console.print("[bold red]Empty query. Please try again.[/bold red]")
                continue

            top_k = self.config.get("search", {}).get("top_k", 10)
            try:
                top_k_input = console.input(f"Number of results to show (default: {top_k}): ")
                if top_k_input:
                    top_k = int(top_k_input)
            except ValueError:
                console.print(f"[yellow]Invalid number. Using default: {top_k}[/yellow]")

            self.display_results(self.search(query, top_k))


def main(argv=None):
    """Main entry point for the CLI application"""
    parser = argparse.ArgumentParser(
        description='WordIndex - Inverted index and TF-IDF search over a document collection'
    )
    parser.add_argument('--collection', help='Path to collection file (one document path per line)')
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--query', help='Query string to search for')
    parser.add_argument('--top', type=int, default=None,
                      help='Number of top results to display (0 shows all)')
    parser.add_argument('--dump', nargs='?', const='', default=None, metavar='PATH',
                      help='Write the index dump (default path from config)')
    parser.add_argument('--sample', type=int, default=0,
                      help='Show the first N words of the index')
    parser.add_argument('--stats', action='store_true',
                      help='Show index statistics')
    parser.add_argument('--interactive', action='store_true',
                      help='Run in interactive mode')
    args = parser.parse_args(argv)

    if args.config and not os.path.exists(args.config):
        console.print(f"[bold red]Config file not found:[/bold red] {args.config}")
        sys.exit(1)

    cli = WordIndexCLI(config=load_config(args.config))

    console.print("\n")
    console.rule("[bold blue]WordIndex[/bold blue]", style="blue")
    cli.print_header()
    console.rule(style="blue")

    # Run in interactive mode if specified or if no collection is given
    if args.interactive or not args.collection:
        if args.collection and not cli.load_collection(args.collection):
            sys.exit(1)
        cli.interactive_mode()
        return

    if not cli.load_collection(args.collection):
        sys.exit(1)

    if args.dump is not None:
        if not cli.dump_index(args.dump or None):
            sys.exit(1)

    if args.sample:
        cli.show_sample(args.sample)

    if args.stats:
        cli.show_statistics()

    if args.query:
        console.rule("[bold yellow]TF-IDF Query Search[/bold yellow]", style="yellow")
        cli.display_results(cli.search(args.query, args.top))


if __name__ == "__main__":
    main()
