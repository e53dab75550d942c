##
# .message - codec message representation
##
from operator import itemgetter
from .python.element import Element, prime_factor
# Final msghook called exists at .sys.msghook
from . import sys as pg_sys

class Message(Element):
	"""
	A message emitted by a codec. Errors and warnings are both messages; the
	`details` dictionary carries the structured information about the
	condition: the ``offset`` into the literal, the element ``index``, the
	detected ``dimensions``, and so on.
	"""
	_e_label = property(lambda x: getattr(x, 'details').get('severity', 'MESSAGE'))
	_e_factors = ('creator',)

	def _e_metas(self, get0 = itemgetter(0)):
		yield (None, self.message)
		if self.code and self.code != "00000":
			yield ('CODE', self.code)
		yield ('LOCATION', self.source)
		for k, v in sorted(self.details.items(), key = get0):
			if k not in self.standard_detail_coverage:
				yield (k.upper(), str(v))

	source = 'CLIENT'
	code = '00000'
	message = None
	details = None

	def isconsistent(self, other):
		"""
		Return `True` if the all the fields of the message in `self` are
		equivalent to the fields in `other`.
		"""
		if not isinstance(other, self.__class__):
			return False
		# creator is contextual information
		return (
			self.code == other.code and \
			self.message == other.message and \
			self.details == other.details and \
			self.source == other.source
		)

	def __init__(self,
		message : "The primary information of the message",
		code : "Message code to attach (SQL state)" = None,
		details : "additional information associated with the message" = {},
		source : "Which side generated the message(SERVER, CLIENT)" = None,
		creator : "The object whose operation produced the message" = None,
	):
		self.message = message
		self.details = details
		self.creator = creator
		if code is not None and self.code != code:
			self.code = code
		if source is not None and self.source != source:
			self.source = source

	def __repr__(self):
		return "{mod}.{typname}({message!r}{code}{details}{source}{creator})".format(
			mod = self.__module__,
			typname = self.__class__.__name__,
			message = self.message,
			code = (
				"" if self.code == type(self).code
				else ", code = " + repr(self.code)
			),
			details = (
				"" if not self.details
				else ", details = " + repr(self.details)
			),
			source = (
				"" if self.source == type(self).source
				else ", source = " + repr(self.source)
			),
			creator = (
				"" if self.creator is None
				else ", creator = " + repr(self.creator)
			)
		)

	# keys to filter in .details; the literal is rendered by errformat.
	standard_detail_coverage = frozenset(['message', 'severity', 'literal'])

	def emit(self, starting_point = None):
		"""
		Take the given message object and hand it to all the primary
		factors(creator) with a msghook callable.
		"""
		if starting_point is not None:
			f = starting_point
		else:
			f = self.creator

		while f is not None:
			if getattr(f, 'msghook', None) is not None:
				if f.msghook(self):
					# the trap returned a nonzero value,
					# so don't continue raising. (like with's __exit__)
					return f
			f = prime_factor(f)
			if f:
				f = f[1]
		# if the next primary factor is without a hook or does not exist,
		# send the message to pgliteral.sys.msghook
		pg_sys.msghook(self)
