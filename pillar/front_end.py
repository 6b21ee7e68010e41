"""
Words in, values out.

A line splits on the space character and nothing else. The first empty word
(leading, trailing, or doubled spaces) ends the line right there. Top-level
words come out one at a time, so that each can be evaluated before the next
is even classified. A brace-group comes out whole, as a single Block.
"""
import re
from typing import Iterator, Sequence
from .location import Span, Word
from .ontology import Value, Number, Operator, Symbol, Block, SYMBOL_PREFIX
from .faults import UnterminatedBlock

OPEN, CLOSE = "{", "}"
INTEGER = re.compile(r"[+-]?[0-9]+")

def split_words(text:str) -> list[Word]:
	words, start = [], 0
	for piece in text.split(" "):
		if not piece: break
		stop = start + len(piece)
		words.append(Word(piece, Span(text, slice(start, stop))))
		start = stop + 1
	return words

def _literal(word:Word):
	if INTEGER.fullmatch(word.text): return Number(int(word.text), word.spot)

def classify(word:Word) -> Value:
	""" For words at top level. A lone slash is division, not an empty symbol. """
	number = _literal(word)
	if number is not None: return number
	text = word.text
	if text.startswith(SYMBOL_PREFIX) and len(text) > len(SYMBOL_PREFIX):
		return Symbol(text[len(SYMBOL_PREFIX):], word.spot)
	return Operator(text, word.spot)

def _classify_within_block(word:Word) -> Value:
	# Inside braces there are only numbers and everything else.
	return _literal(word) or Operator(word.text, word.spot)

def parse_block(words:Sequence[Word], start:int) -> tuple[Block, int]:
	"""
	The word at `start` must be an opening brace.
	Returns the block and the index just past its closing brace.
	Nesting keeps its own stack of open groups, so depth is limited only by memory.
	"""
	assert words[start].text == OPEN, words[start]
	groups = [(words[start], [])]
	index = start + 1
	while index < len(words):
		word = words[index]
		index += 1
		if word.text == OPEN:
			groups.append((word, []))
		elif word.text == CLOSE:
			opener, items = groups.pop()
			spot = Span(opener.spot.line, slice(opener.spot.slice.start, word.spot.slice.stop))
			block = Block(items, spot)
			if not groups: return block, index
			groups[-1][1].append(block)
		else:
			groups[-1][1].append(_classify_within_block(word))
	raise UnterminatedBlock(groups[-1][0], None)

def read_line(text:str) -> Iterator[Value]:
	words = split_words(text)
	index = 0
	while index < len(words):
		if words[index].text == OPEN:
			block, index = parse_block(words, index)
			yield block
		else:
			yield classify(words[index])
			index += 1
