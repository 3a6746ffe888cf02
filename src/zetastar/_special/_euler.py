# zetastar/_special/_euler.py
#
# Copyright (c) 2026, Giacomo Petrillo
#
# This file is part of zetastar.
#
# zetastar is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# zetastar is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with zetastar.  If not, see <http://www.gnu.org/licenses/>.

import numpy

from .. import _precision
from . import _recurrence

def euler(n):
    """ E_n for an integer array n >= 0, in extended precision """
    n = numpy.asarray(n)
    even = _recurrence.even_term(EULER, numpy.where(n % 2, 0, n))
    return numpy.where(n % 2, 0, even).astype(_precision.EXTENDED)

@_precision.indexed
def xeuler_number(n):
    """
    Compute the Euler numbers E_n, the coefficients of 1/cosh(x) = sum_n E_n
    x^n / n!.

    Odd indices give 0. Beyond the largest representable index the largest
    finite value is returned, with the sign the number would have.

    Parameters
    ----------
    n : int array
        Non-negative index.

    Returns
    -------
    E : longdouble array
        The Euler number E_n.

    Raises
    ------
    ValueError :
        If any index is negative.
    """
    _recurrence.check_index(n)
    return euler(n)

def xeuler_number_sequence(start, length):
    """
    Compute the Euler numbers E_start, E_(start+1), ... for `length`
    consecutive indices.
    """
    return xeuler_number(_recurrence.index_range(start, length, 1))

def xeuler_even_index_sequence(start, length):
    """
    Compute the Euler numbers E_start, E_(start+2), ... for `length` indices
    spaced by 2.
    """
    return xeuler_number(_recurrence.index_range(start, length, 2))

def xmax_euler_even_index():
    """ The largest even index whose Euler number is finite in extended
    precision. """
    return EULER.maxindex

def max_euler_even_index():
    """ The largest even index whose Euler number is finite in double
    precision. """
    return _recurrence.maxdense(EULER)

euler_number = _precision.demote(xeuler_number)
euler_number_sequence = _precision.demote(xeuler_number_sequence)
euler_even_index_sequence = _precision.demote(xeuler_even_index_sequence)

def _gen_euler_dense(n): # pragma: no cover
    import mpmath
    with mpmath.workdps(50):
        return [mpmath.nstr(mpmath.eulernum(2 * k), 36) for k in range(n)]

def _gen_euler_sparse(n, start, spacing): # pragma: no cover
    import mpmath
    with mpmath.workdps(50):
        return [
            mpmath.nstr(mpmath.eulernum(start + spacing * j), 36)
            for j in range(n)
        ]

_euler_dense = [ # = _gen_euler_dense(94)
    '+1.00000000000000000000000000000000000',
    '-1.00000000000000000000000000000000000',
    '+5.00000000000000000000000000000000000',
    '-6.10000000000000000000000000000000000e+1',
    '+1.38500000000000000000000000000000000e+3',
    '-5.05210000000000000000000000000000000e+4',
    '+2.70276500000000000000000000000000000e+6',
    '-1.99360981000000000000000000000000000e+8',
    '+1.93915121450000000000000000000000000e+10',
    '-2.40487967544100000000000000000000000e+12',
    '+3.70371188237525000000000000000000000e+14',
    '-6.93488743931379010000000000000000000e+16',
    '+1.55145341635570869050000000000000000e+19',
    '-4.08707250929312389236100000000000000e+21',
    '+1.25225964140362986546828500000000000e+24',
    '-4.41543893249023104553682821000000000e+26',
    '+1.77519391579539289436664789665000000e+29',
    '-8.07232992358878980621682474532810000e+31',
    '+4.12220603395177021223470796712590450e+34',
    '-2.34895805270431082520178285761989477e+37',
    '+1.48511507181149800178771567814058267e+40',
    '-1.03646227335196121193979573047451860e+43',
    '+7.94757942259759270360804051008807062e+45',
    '-6.66753751668554497743502847477374820e+48',
    '+6.09627864556854215869168574287684315e+51',
    '-6.05328524818862189631438378511164909e+54',
    '+6.50616248668460884771587063408082298e+57',
    '-7.54665993900873909806143256588973674e+60',
    '+9.42032189642024120420228623769058323e+63',
    '-1.26220192518062187199034092372874893e+67',
    '+1.81089114965792304965458077416521587e+70',
    '-2.77571017020715805973669809083715274e+73',
    '+4.53581033300178891747468878715677624e+76',
    '-7.88628420666178941810072074223999042e+79',
    '+1.45618443801396315007150470094942327e+83',
    '-2.85051783223697718732198729556739340e+86',
    '+5.90574720777544365455135032296439571e+89',
    '-1.29297366418786417049760323593869875e+93',
    '+2.98692818328457695093074365221714061e+96',
    '-7.27060171401686414380328065169928185e+99',
    '+1.86229157584126970444824923030431260e+103',
    '-5.01310494081097966129086936788810094e+106',
    '+1.41652557597856259916722069410021670e+110',
    '-4.19664316404024471322573414069418892e+113',
    '+1.30215959052404639812585869133081868e+117',
    '-4.22724068613990906470558992921459310e+120',
    '+1.43432127919765834061336826405785659e+124',
    '-5.08179907245804251645597576430907360e+127',
    '+1.87833293645293026402007579184179893e+131',
    '-7.23653438103385777657187661736782293e+134',
    '+2.90352834666109749705460383476443588e+138',
    '-1.21229373789292182105392954978560988e+142',
    '+5.26306424961699070600224073584236661e+145',
    '-2.37407307193676634703461698760652652e+149',
    '+1.11189009424828230249702335881757893e+153',
    '-5.40307865979529320561911549426347699e+156',
    '+2.72234108557222702137153414458909549e+160',
    '-1.42130105480096698118085204572231882e+164',
    '+7.68426182064690265317095628366647794e+167',
    '-4.29962192543974964281889033648632755e+171',
    '+2.48839157478298716316902455408489408e+175',
    '-1.48875820890620408401048810913362396e+179',
    '+9.20261411885209418840864126560312709e+182',
    '-5.87424445729243560747806550051798443e+186',
    '+3.87013355417592724899726125339465800e+190',
    '-2.63038464627282201918918005755736145e+194',
    '+1.84342186190681643216739318103276967e+198',
    '-1.33150076083199759777989619061195919e+202',
    '+9.90773407946409970275719941594148144e+205',
    '-7.59161615376086554230567716763177264e+209',
    '+5.98738690421595478060934030092899051e+213',
    '-4.85853153680527007166022567445774339e+217',
    '+4.05474737750791455464680535308584710e+221',
    '-3.47892371339090601415585327133292340e+225',
    '+3.06749738825108489449144357479461161e+229',
    '-2.77857404780457414987248665136951661e+233',
    '+2.58465603902711815098815082730837912e+237',
    '-2.46817048046364050455631133967404223e+241',
    '+2.41875397603671333264713788326666700e+245',
    '-2.43169264709107277171036789982532904e+249',
    '+2.50718300057371449601915222347628344e+253',
    '-2.65025200052581375350895159803901660e+257',
    '+2.87130197316667968492991621100369935e+261',
    '-3.18736021623541104699251674698644208e+265',
    '+3.62424164505845624987618515668413679e+269',
    '-4.22000551313026080825687414912160887e+273',
    '+5.03034557853150041609481420707106604e+277',
    '-6.13696178494213385049453688204944205e+281',
    '+7.66062813846337323811799348691311731e+285',
    '-9.78178011283967454892036825005468034e+289',
    '+1.27733166367198064207287773215186928e+294',
    '-1.70535141854472052178024263787253627e+298',
    '+2.32725003482003005917234767874590751e+302',
    '-3.24554745838924695277710327883293385e+306',
]

_euler_sparse = [ # = _gen_euler_sparse(84, 198, 20)
    '-3.71689279117523442595544500254463863e+331',
    '-1.06311359653345223864436771012921321e+374',
    '-1.90168660939480511426680883012390551e+417',
    '-1.82360055378359429711155051316921460e+461',
    '-8.23027064165985474131958899398954349e+505',
    '-1.56385817382680568575406775082477747e+551',
    '-1.13601858351201446481652700044863755e+597',
    '-2.89972526042905613264942493451548329e+643',
    '-2.41449160212277660702694362235429277e+690',
    '-6.13923642063764529502742716554716146e+737',
    '-4.49345452991421399120978866459294351e+785',
    '-8.97756427858091603493628046427874307e+833',
    '-4.66649628412561566112495499374042969e+882',
    '-6.04121575288815948930398991671029254e+931',
    '-1.87180552718945404097300923918204788e+981',
    '-1.33828725733423286269574102549431884e+1031',
    '-2.13507148521639810691301131823700866e+1081',
    '-7.36881516180485529387395142592851172e+1131',
    '-5.34629271818275753228776887082132305e+1182',
    '-7.93994931537857379076878224802396551e+1233',
    '-2.35468354083176548121879172953683941e+1285',
    '-1.36256313991614050926850541390176391e+1337',
    '-1.50556372657638989747009698111842025e+1389',
    '-3.11284733054824529224374576953616573e+1441',
    '-1.18158607487418410261222802947146061e+1494',
    '-8.08801726111725843172147531651065154e+1546',
    '-9.81643809823724419884007786352216236e+1599',
    '-2.07910013133804812354853355753212500e+1653',
    '-7.56930837541337892139699683121856588e+1706',
    '-4.66972792066728622296744289609326778e+1760',
    '-4.81610248406603883098616688457328879e+1814',
    '-8.19743050944023143124899502165823523e+1868',
    '-2.27467877743666711876140790482727335e+1923',
    '-1.01708883510992495528701764597271305e+1978',
    '-7.24713502324577739139163393961357841e+2032',
    '-8.14206430760392132452579711261951630e+2087',
    '-1.42777791267301339879573300294254805e+2143',
    '-3.87020326879714541757030010244668726e+2198',
    '-1.60665423922633014521515539843501180e+2254',
    '-1.01242632924908849366960604899985285e+2310',
    '-9.60177614062521427824715338407438326e+2365',
    '-1.35934628187734525852976141636933705e+2422',
    '-2.85024353254759106702939719903467501e+2478',
    '-8.78459548954654778895625926626374915e+2534',
    '-3.95082936134681306929563741719263829e+2591',
    '-2.57476454552965258406462266542008726e+2648',
    '-2.41510717284989111843875921913046006e+2705',
    '-3.23934156259324876775018008688539071e+2762',
    '-6.17404394147989101444878513450330120e+2819',
    '-1.66203723229668229358143280398234422e+2877',
    '-6.28238716467387724217301253134289069e+2934',
    '-3.31559423076960589817743629291310796e+2992',
    '-2.42980470187528459765452596366063711e+3050',
    '-2.45952997288228016987778866037825470e+3108',
    '-3.42116693869848570260313245422990149e+3166',
    '-6.50696101102246931508146345414188986e+3224',
    '-1.68411158327294985991824801902019600e+3283',
    '-5.90367820482716088594963172965098921e+3341',
    '-2.79038893561987423773706900511763896e+3400',
    '-1.77046003842729191681938978065902674e+3459',
    '-1.50152085350928546047713454578423983e+3518',
    '-1.69511069697400132340540764825576045e+3577',
    '-2.53708286823564266907689208268515865e+3636',
    '-5.01462288249826981432317099431657482e+3695',
    '-1.30392553956406453204046059515359276e+3755',
    '-4.44392637758750127722200395339888769e+3814',
    '-1.97793559595110527837198995052984148e+3874',
    '-1.14567558496959386333167877391244865e+3934',
    '-8.60653003813875214291824475170620541e+3993',
    '-8.35722918866828791359937607765858591e+4053',
    '-1.04556714366068261009547015886547413e+4114',
    '-1.68004099070122568539355287290779560e+4174',
    '-3.45639321975421581752867245423113382e+4234',
    '-9.07719145861269666305648782790544439e+4294',
    '-3.03407494116294501445636329338932582e+4355',
    '-1.28706183526776733830096061273568150e+4416',
    '-6.90958658904844127325973020523167394e+4476',
    '-4.68159529384680939138368853648510930e+4537',
    '-3.99265538426709382066133671034331935e+4598',
    '-4.27483540993886283363581320122434618e+4659',
    '-5.73133248005026930526104603547695851e+4720',
    '-9.59807574963659813617059370196913709e+4781',
    '-2.00282376205434874170732124553349950e+4843',
    '-5.19507751303279845445675393607490318e+4904',
]

EULER = _recurrence.TabulatedSequence(
    dense=_precision.xarray(_euler_dense),
    sparse=_precision.xarray(_euler_sparse),
    start=198,
    spacing=20,
    ratio=_precision.xconst('2.46740110027233965470862274996903778'), # (π/2)^2
    maxindex=1866,
    sign=1,
)
