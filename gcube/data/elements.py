import numpy as np
import pandas as pd

# Covalent radii in Angstrom (Cordero et al., Dalton Trans. 2008, 2832).
# Elements past curium have no reference value and use 1.50.
_elements_table = [
    (0,'Xx','Dummy',0.18),
    (1,'H','Hydrogen',0.31),
    (2,'He','Helium',0.28),
    (3,'Li','Lithium',1.28),
    (4,'Be','Beryllium',0.96),
    (5,'B','Boron',0.84),
    (6,'C','Carbon',0.76),
    (7,'N','Nitrogen',0.71),
    (8,'O','Oxygen',0.66),
    (9,'F','Fluorine',0.57),
    (10,'Ne','Neon',0.58),
    (11,'Na','Sodium',1.66),
    (12,'Mg','Magnesium',1.41),
    (13,'Al','Aluminium',1.21),
    (14,'Si','Silicon',1.11),
    (15,'P','Phosphorus',1.07),
    (16,'S','Sulfur',1.05),
    (17,'Cl','Chlorine',1.02),
    (18,'Ar','Argon',1.06),
    (19,'K','Potassium',2.03),
    (20,'Ca','Calcium',1.76),
    (21,'Sc','Scandium',1.70),
    (22,'Ti','Titanium',1.60),
    (23,'V','Vanadium',1.53),
    (24,'Cr','Chromium',1.39),
    (25,'Mn','Manganese',1.39),
    (26,'Fe','Iron',1.32),
    (27,'Co','Cobalt',1.26),
    (28,'Ni','Nickel',1.24),
    (29,'Cu','Copper',1.32),
    (30,'Zn','Zinc',1.22),
    (31,'Ga','Gallium',1.22),
    (32,'Ge','Germanium',1.20),
    (33,'As','Arsenic',1.19),
    (34,'Se','Selenium',1.20),
    (35,'Br','Bromine',1.20),
    (36,'Kr','Krypton',1.16),
    (37,'Rb','Rubidium',2.20),
    (38,'Sr','Strontium',1.95),
    (39,'Y','Yttrium',1.90),
    (40,'Zr','Zirconium',1.75),
    (41,'Nb','Niobium',1.64),
    (42,'Mo','Molybdenum',1.54),
    (43,'Tc','Technetium',1.47),
    (44,'Ru','Ruthenium',1.46),
    (45,'Rh','Rhodium',1.42),
    (46,'Pd','Palladium',1.39),
    (47,'Ag','Silver',1.45),
    (48,'Cd','Cadmium',1.44),
    (49,'In','Indium',1.42),
    (50,'Sn','Tin',1.39),
    (51,'Sb','Antimony',1.39),
    (52,'Te','Tellurium',1.38),
    (53,'I','Iodine',1.39),
    (54,'Xe','Xenon',1.40),
    (55,'Cs','Caesium',2.44),
    (56,'Ba','Barium',2.15),
    (57,'La','Lanthanum',2.07),
    (58,'Ce','Cerium',2.04),
    (59,'Pr','Praseodymium',2.03),
    (60,'Nd','Neodymium',2.01),
    (61,'Pm','Promethium',1.99),
    (62,'Sm','Samarium',1.98),
    (63,'Eu','Europium',1.98),
    (64,'Gd','Gadolinium',1.96),
    (65,'Tb','Terbium',1.94),
    (66,'Dy','Dysprosium',1.92),
    (67,'Ho','Holmium',1.92),
    (68,'Er','Erbium',1.89),
    (69,'Tm','Thulium',1.90),
    (70,'Yb','Ytterbium',1.87),
    (71,'Lu','Lutetium',1.87),
    (72,'Hf','Hafnium',1.75),
    (73,'Ta','Tantalum',1.70),
    (74,'W','Tungsten',1.62),
    (75,'Re','Rhenium',1.51),
    (76,'Os','Osmium',1.44),
    (77,'Ir','Iridium',1.41),
    (78,'Pt','Platinum',1.36),
    (79,'Au','Gold',1.36),
    (80,'Hg','Mercury',1.32),
    (81,'Tl','Thallium',1.45),
    (82,'Pb','Lead',1.46),
    (83,'Bi','Bismuth',1.48),
    (84,'Po','Polonium',1.40),
    (85,'At','Astatine',1.50),
    (86,'Rn','Radon',1.50),
    (87,'Fr','Francium',2.60),
    (88,'Ra','Radium',2.21),
    (89,'Ac','Actinium',2.15),
    (90,'Th','Thorium',2.06),
    (91,'Pa','Protactinium',2.00),
    (92,'U','Uranium',1.96),
    (93,'Np','Neptunium',1.90),
    (94,'Pu','Plutonium',1.87),
    (95,'Am','Americium',1.80),
    (96,'Cm','Curium',1.69),
    (97,'Bk','Berkelium',1.50),
    (98,'Cf','Californium',1.50),
    (99,'Es','Einsteinium',1.50),
    (100,'Fm','Fermium',1.50),
    (101,'Md','Mendelevium',1.50),
    (102,'No','Nobelium',1.50),
    (103,'Lr','Lawrencium',1.50),
    (104,'Rf','Rutherfordium',1.50),
    (105,'Db','Dubnium',1.50),
    (106,'Sg','Seaborgium',1.50),
    (107,'Bh','Bohrium',1.50),
    (108,'Hs','Hassium',1.50),
    (109,'Mt','Meitnerium',1.50),
    (110,'Ds','Darmstadtium',1.50),
    (111,'Rg','Roentgenium',1.50),
    (112,'Cn','Copernicium',1.50),
    (113,'Nh','Nihonium',1.50),
    (114,'Fl','Flerovium',1.50),
    (115,'Mc','Moscovium',1.50),
    (116,'Lv','Livermorium',1.50),
    (117,'Ts','Tennessine',1.50),
    (118,'Og','Oganesson',1.50),
]

elements = pd.DataFrame.from_records(_elements_table,
                                     index='number',
                                     columns=['number', 'symbol', 'name', 'covalent_radius'])

elements_by_number = elements
elements_by_symbol = elements.reset_index().set_index('symbol')
elements_by_name   = elements.reset_index().set_index('name')

# Cube files store atomic numbers in a byte; anything past the table is unnamed
_default_radius = 1.50

def element_number_to_symbol(num):
    num = int(num)
    try:
        return elements_by_number['symbol'][num]
    except KeyError:
        return 'Xx'

def covalent_radius(num):
    try:
        return float(elements_by_number['covalent_radius'][int(num)])
    except KeyError:
        return _default_radius

def covalent_radii(nums):
    '''Vectorized `covalent_radius` for an array of atomic numbers.'''
    nums = np.asarray(nums, dtype=np.int64)
    return (elements_by_number['covalent_radius']
            .reindex(nums, fill_value=_default_radius)
            .to_numpy(dtype=np.float64))

def element_label_to_number(label):
    '''Attempt to convert a label (name, symbol, or atomic number) to atomic number'''

    if not isinstance(label, str):
        return int(label)

    # try atomic symbol
    try:
        return int(elements_by_symbol['number'][label.title()])
    except KeyError:
        pass

    # Try atomic number
    try:
        return int(label)
    except ValueError:
        pass

    # Try name
    try:
        return int(elements_by_name['number'][label.title()])
    except KeyError:
        pass

    raise ValueError('could not identify {!r} as an element'.format(label))
