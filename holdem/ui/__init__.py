"""德州扑克用户界面包."""
