# pylint: disable=W0611
from milner import args, errors, log, main, pprint_, samples, scope, type_inference
from milner.asts import base, types_ as types
