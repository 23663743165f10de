"""
Console exporter for debugging and development.
"""

import json
from typing import Any, Dict

from evt_tracer.exporters.base import BaseExporter


class ConsoleExporter(BaseExporter):
    """Prints span events to console."""
    
    def __init__(self, colored: bool = True, verbose: bool = False):
        """
        Initialize console exporter.
        
        Args:
            colored: Whether to use ANSI colors in output
            verbose: Whether to print full event data as JSON
        """
        self.colored = colored
        self.verbose = verbose
    
    def export(self, event: Dict[str, Any]) -> bool:
        """Print event to console."""
        kind = event.get("kind", "unknown")
        operation = event.get("operation", "unknown")
        trace_id = event.get("trace_id", "")
        span_id = event.get("span_id", "")
        parent_span_id = event.get("parent_span_id", "")
        end = "END" if event.get("end") else ""
        tags = event.get("tags") or {}
        tag_text = " ".join(f"{key}={value}" for key, value in sorted(tags.items()))
        
        if self.colored:
            # ANSI colors
            colors = {
                "client.request": "\033[94m",   # Blue
                "client.response": "\033[96m",  # Cyan
                "server.request": "\033[92m",   # Green
                "server.response": "\033[93m",  # Yellow
            }
            reset = "\033[0m"
            color = colors.get(kind, "\033[95m")
            end_color = "\033[91m"
            
            print(f"{color}[{kind:15}]{reset} {operation:30} | trace:{trace_id} span:{span_id} parent:{parent_span_id} | {end_color}{end:3}{reset} | {tag_text}")
        else:
            print(f"[{kind:15}] {operation:30} | trace:{trace_id} span:{span_id} parent:{parent_span_id} | {end:3} | {tag_text}")
        
        if self.verbose:
            print(f"    {json.dumps(event, indent=2, default=str)}")
        
        return True
