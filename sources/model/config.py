#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Parametres d'affichage : fichiers cle=valeur types par les defauts.

Le fichier defaults_<nom>.cfg livre avec le package declare toutes les
cles connues et leur type. Un fichier utilisateur ou un dict de
surcharges ne peut contenir que ces cles ; chaque valeur est convertie
dans le type de la valeur par defaut. Les listes de couleurs ecrites
'a,b,c' deviennent des listes Python des la lecture.

Usage::

    defaults = load_defaults('display')
    params = merge_params(defaults, {'SHOW_BOX': 'yes', 'N_SAMPLES': 50.0})
    params['SHOW_BOX']       # True
    params['LERP_COLORS']    # ['chocolate', 'coral', 'bisque']

@author: Nervures
@date: 2026-10
"""

import logging
import os

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

# Cles dont la valeur est une liste separee par des virgules
LIST_KEYS = ('LERP_COLORS', 'POINT_COLORS', 'POINT_BORDER_COLORS')

_TRUE = ('true', 'yes', 'on')
_FALSE = ('false', 'no', 'off')


def parse_list(value):
    """'a, b,c' -> ['a', 'b', 'c'] ; une sequence est copiee en liste."""
    if isinstance(value, str):
        return [v.strip() for v in value.split(',') if v.strip()]
    return list(value)


def _infer(text):
    """Type d'une valeur texte sans reference : bool, int, float ou str."""
    low = text.lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            pass
    return text


def convert_value(key, value, reference=None):
    """Convertit une valeur lue ou fournie pour la cle key.

    :param key: nom de la cle (majuscules)
    :type key: str
    :param value: valeur brute (texte du fichier ou objet Python)
    :param reference: valeur par defaut de la cle ; son type impose la
        conversion. None = type infere depuis le texte.
    :returns: valeur typee
    :raises InvalidArgument: si la valeur ne peut pas prendre le type de
        la reference
    """
    if key in LIST_KEYS:
        return parse_list(value)
    if isinstance(value, str):
        value = value.strip()
    if reference is None:
        return _infer(value) if isinstance(value, str) else value

    if isinstance(reference, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in _TRUE + _FALSE:
            return value.lower() in _TRUE
        raise InvalidArgument("%s attend un booleen, recu %r" % (key, value))

    if isinstance(reference, (int, float)):
        if isinstance(value, bool):
            raise InvalidArgument("%s attend un nombre, recu %r"
                                  % (key, value))
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidArgument("%s attend un nombre, recu %r"
                                  % (key, value))
        if isinstance(reference, int):
            if not number.is_integer():
                raise InvalidArgument("%s attend un entier, recu %r"
                                      % (key, value))
            return int(number)
        return number

    return str(value)


def load_config(filepath, defaults=None):
    """Charge un fichier de configuration cle=valeur.

    Les lignes vides et les lignes commencant par # sont ignorees ; une
    ligne sans '=' est signalee dans le log puis ignoree.

    :param filepath: chemin du fichier .cfg
    :type filepath: str
    :param defaults: cles declarees et valeurs de reference ; None = toutes
        les cles acceptees, types inferes
    :type defaults: dict or None
    :returns: dictionnaire des parametres
    :rtype: dict
    :raises IOError: si le fichier n'existe pas
    :raises InvalidArgument: cle non declaree ou valeur mal typee
    """
    if not os.path.isfile(filepath):
        raise IOError("Fichier de configuration introuvable : %s" % filepath)
    params = {}
    with open(filepath, 'r') as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            if '=' not in line:
                logger.warning("%s:%d : ligne ignoree (pas de '=') : %r",
                               filepath, lineno, line)
                continue
            key, value = (s.strip() for s in line.split('=', 1))
            if defaults is None:
                params[key] = convert_value(key, value)
            elif key not in defaults:
                raise InvalidArgument("%s:%d : cle inconnue %s"
                                      % (filepath, lineno, key))
            else:
                params[key] = convert_value(key, value, defaults[key])
    logger.debug("%s : %d parametres lus", filepath, len(params))
    return params


def load_defaults(name='display'):
    """Charge le jeu de parametres par defaut defaults_<name>.cfg.

    Le fichier est cherche a cote de ce module (donnees du package).

    :rtype: dict
    """
    cfg_dir = os.path.dirname(os.path.abspath(__file__))
    return load_config(os.path.join(cfg_dir, 'defaults_%s.cfg' % name))


def merge_params(defaults, user_params):
    """Surcharge les defauts par les parametres utilisateur.

    Chaque valeur utilisateur est convertie dans le type de la valeur par
    defaut. Les defauts ne sont pas modifies.

    :param defaults: parametres par defaut (cles declarees)
    :type defaults: dict
    :param user_params: surcharges, peuvent etre None
    :type user_params: dict or None
    :returns: parametres fusionnes
    :rtype: dict
    :raises InvalidArgument: cle non declaree dans les defauts ou valeur
        mal typee
    """
    merged = dict(defaults)
    if not user_params:
        return merged
    unknown = sorted(k for k in user_params if k not in defaults)
    if unknown:
        raise InvalidArgument("Parametres inconnus : %s. Cles valides : %s"
                              % (', '.join(unknown),
                                 ', '.join(sorted(defaults))))
    for key, value in user_params.items():
        merged[key] = convert_value(key, value, defaults[key])
    return merged
