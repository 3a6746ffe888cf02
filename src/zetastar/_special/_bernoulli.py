# zetastar/_special/_bernoulli.py
#
# Copyright (c) 2022, Giacomo Petrillo
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

def bernoulli(n):
    """ B_n for an integer array n >= 0, in extended precision """
    n = numpy.asarray(n)
    even = _recurrence.even_term(BERNOULLI, numpy.where(n % 2, 0, n))
    odd = numpy.where(n == 1, -0.5, 0)
    return numpy.where(n % 2, odd, even).astype(_precision.EXTENDED)

@_precision.indexed
def xbernoulli_number(n):
    """
    Compute the Bernoulli numbers B_n.

    The convention is B_1 = -1/2. Odd indices larger than 1 give 0. Beyond
    the largest representable index the largest finite value is returned,
    with the sign the number would have.

    Parameters
    ----------
    n : int array
        Non-negative index.

    Returns
    -------
    B : longdouble array
        The Bernoulli number B_n.

    Raises
    ------
    ValueError :
        If any index is negative.
    """
    _recurrence.check_index(n)
    return bernoulli(n)

def xbernoulli_number_sequence(start, length):
    """
    Compute the Bernoulli numbers B_start, B_(start+1), ... for `length`
    consecutive indices.
    """
    return xbernoulli_number(_recurrence.index_range(start, length, 1))

def xbernoulli_even_index_sequence(start, length):
    """
    Compute the Bernoulli numbers B_start, B_(start+2), ... for `length`
    indices spaced by 2. `start` is normally even.
    """
    return xbernoulli_number(_recurrence.index_range(start, length, 2))

def xmax_bernoulli_even_index():
    """ The largest even index whose Bernoulli number is finite in extended
    precision. """
    return BERNOULLI.maxindex

def max_bernoulli_even_index():
    """ The largest even index whose Bernoulli number is finite in double
    precision. """
    return _recurrence.maxdense(BERNOULLI)

bernoulli_number = _precision.demote(xbernoulli_number)
bernoulli_number_sequence = _precision.demote(xbernoulli_number_sequence)
bernoulli_even_index_sequence = _precision.demote(xbernoulli_even_index_sequence)

def _gen_bernoulli_dense(n): # pragma: no cover
    import mpmath
    with mpmath.workdps(50):
        return [mpmath.nstr(mpmath.bernoulli(2 * k), 36) for k in range(n)]

def _gen_bernoulli_sparse(n, start, spacing): # pragma: no cover
    import mpmath
    with mpmath.workdps(50):
        return [
            mpmath.nstr(mpmath.bernoulli(start + spacing * j), 36)
            for j in range(n)
        ]

_bernoulli_dense = [ # = _gen_bernoulli_dense(130)
    '+1.00000000000000000000000000000000000',
    '+1.66666666666666666666666666666666667e-1',
    '-3.33333333333333333333333333333333333e-2',
    '+2.38095238095238095238095238095238095e-2',
    '-3.33333333333333333333333333333333333e-2',
    '+7.57575757575757575757575757575757576e-2',
    '-2.53113553113553113553113553113553114e-1',
    '+1.16666666666666666666666666666666667e+0',
    '-7.09215686274509803921568627450980392e+0',
    '+5.49711779448621553884711779448621554e+1',
    '-5.29124242424242424242424242424242424e+2',
    '+6.19212318840579710144927536231884058e+3',
    '-8.65802531135531135531135531135531136e+4',
    '+1.42551716666666666666666666666666667e+6',
    '-2.72982310678160919540229885057471264e+7',
    '+6.01580873900642368384303868174835917e+8',
    '-1.51163157670921568627450980392156863e+10',
    '+4.29614643061166666666666666666666667e+11',
    '-1.37116552050883327721590879485616328e+13',
    '+4.88332318973593166666666666666666667e+14',
    '-1.92965793419400681486326681448632668e+16',
    '+8.41693047573682615000553709856035437e+17',
    '-4.03380718540594554130768115942028986e+19',
    '+2.11507486380819916056014539007092199e+21',
    '-1.20866265222965259346027311937082525e+23',
    '+7.50086674607696436685572007575757576e+24',
    '-5.03877810148106891413789303052201258e+26',
    '+3.65287764848181233351104308429711779e+28',
    '-2.84987693024508822262691464329106782e+30',
    '+2.38654274996836276446459819192192150e+32',
    '-2.13999492572253336658107447651910974e+34',
    '+2.05009757234780975699217330956723103e+36',
    '-2.09380059113463784090951852900279702e+38',
    '+2.27526964884635155596492603527692646e+40',
    '-2.62577102862395760473030497361582021e+42',
    '+3.21250821027180325182047923042649852e+44',
    '-4.15982781667947109139170744952623589e+46',
    '+5.69206954820352800238834562191210586e+48',
    '-8.21836294197845756922906534686173330e+50',
    '+1.25029043271669930167323398297028955e+53',
    '-2.00155832332483702749253291988132988e+55',
    '+3.36749829153643742333966769033387530e+57',
    '-5.94709705031354477186604968440515408e+59',
    '+1.10119103236279775595641307904376916e+62',
    '-2.13552595452535011886583850190410657e+64',
    '+4.33288969866411924196166130593792062e+66',
    '-9.18855282416693282262005552155018971e+68',
    '+2.03468967763290744934550279902200201e+71',
    '-4.70038339580357310785752555350060607e+73',
    '+1.13180434454842492706751862577339343e+76',
    '-2.83822495706937069592641563364817647e+78',
    '+7.40642489796788506297508271409209842e+80',
    '-2.00964548027566044834656196727153632e+83',
    '+5.66571700508059414457193460305193570e+85',
    '-1.65845111541362169158237133743199123e+88',
    '+5.03688599504923774192894219151801548e+90',
    '-1.58614682376581863693634015729664388e+93',
    '+5.17567436175456269840732406825071226e+95',
    '-1.74889218402171173396900258776181591e+98',
    '+6.11605199949521852558245252642641678e+100',
    '-2.21227769127078349422883234567129324e+103',
    '+8.27227767987709698542210624599845957e+105',
    '-3.19589251114157095835916343691808149e+108',
    '+1.27500822233877929823100243029266799e+111',
    '-5.25009230867741338994028246245651754e+113',
    '+2.23018178942416252098692981988387281e+116',
    '-9.76845219309552044386335133989802393e+118',
    '+4.40983619784529542722726228748131692e+121',
    '-2.05085708864640888397293377275830155e+124',
    '+9.82144332797912771075729696020975210e+126',
    '-4.84126007982088805087891967099634128e+129',
    '+2.45530888014809826097834674040886904e+132',
    '-1.28069268040847475487825132786017857e+135',
    '+6.86761671046685811921018885984644004e+137',
    '-3.78464685819691046949789954163795568e+140',
    '+2.14261012506652915508713231351482721e+143',
    '-1.24567271371836950070196429616376072e+146',
    '+7.43457875510001525436796683940520613e+148',
    '-4.55357953046417048940633332233212749e+151',
    '+2.86121128168588683453638472510172325e+154',
    '-1.84377235520338697276882026536287855e+157',
    '+1.21811545362210466995013165065995214e+160',
    '-8.24821871853141215484818457296893447e+162',
    '+5.72258779378329433296516498142978616e+165',
    '-4.06685305250591047267679693831158656e+168',
    '+2.95960920646420500628752695815851870e+171',
    '-2.20495225651894575090311752273445985e+174',
    '+1.68125970728895998058311525151360666e+177',
    '-1.31167362135569576486452806355817153e+180',
    '+1.04678940094780380821832853929823090e+183',
    '-8.54328935788337077185982546299082775e+185',
    '+7.12878213224865423522884066771438225e+188',
    '-6.08029314555358993000847118686477458e+191',
    '+5.29967764248499239300942910043247266e+194',
    '-4.71942591687458626443646229013379911e+197',
    '+4.29284137914029810894168296541074669e+200',
    '-3.98767449682322074434477655542938795e+203',
    '+3.78197804193588827138944181161393328e+206',
    '-3.66142336836811912436858082151197349e+209',
    '+3.61760902723728623488554609298914089e+212',
    '-3.64707726451913543621383088655499449e+215',
    '+3.75087554364544090983452410104814189e+218',
    '-3.93458672964390282694891288533713429e+221',
    '+4.20882111481900820046571171111494898e+224',
    '-4.59022962206179186559802940573325591e+227',
    '+5.10317257726295759279198185106496769e+230',
    '-5.78227623036569554015377271242917143e+233',
    '+6.67624821678358810322637794412809363e+236',
    '-7.85353076444504163225916259639312444e+239',
    '+9.41068940670587255245443288258762485e+242',
    '-1.14849338734651839938498599206805593e+246',
    '+1.42729587428487856771416320087122500e+249',
    '-1.80595595869093090142285728117654561e+252',
    '+2.32615353076608052161297985184708876e+255',
    '-3.04957517154995947681942819261542594e+258',
    '+4.06858060764339734424012124124937319e+261',
    '-5.52310313219743616252320044093186392e+264',
    '+7.62772793964343924869949690204961216e+267',
    '-1.07155711196978863132793524001065397e+271',
    '+1.53102008959691884453440916153355334e+274',
    '-2.22448916821798346676602348865048511e+277',
    '+3.28626791906901391668189736436895275e+280',
    '-4.93559289559603449020711938191575963e+283',
    '+7.53495712008325067212266049779283957e+286',
    '-1.16914851545841777278088924731655042e+290',
    '+1.84352614678389394126646201597702232e+293',
    '-2.95368261729680829728014917350525183e+296',
    '+4.80793212775015697668878704043264072e+299',
    '-7.95021250458852528538243631671158693e+302',
    '+1.33527841873546338750122832017820518e+306',
]

_bernoulli_sparse = [ # = _gen_bernoulli_sparse(103, 270, 20)
    '+4.13121317607384235973251163948966940e+325',
    '+4.06725630354221225869883600368201604e+358',
    '+1.58852491244122147281469212106982170e+392',
    '+2.25191059133671680915395814672577572e+426',
    '+1.07164338264967557208686546587391661e+461',
    '+1.59752224396858654822751463995972770e+496',
    '+7.01366744280728845244177798142505561e+531',
    '+8.58020723503261785605925064309501976e+567',
    '+2.78229778527875642617754227085498409e+604',
    '+2.28549456528753068146575779851703354e+641',
    '+4.56346231319052136323518242017878446e+678',
    '+2.13274737136019050759574844453691108e+716',
    '+2.25344601183435273327994630683594073e+754',
    '+5.21352427258719957498011735101632252e+792',
    '+2.56421038571922400015654824093410897e+831',
    '+2.60860868193932239358106918827162612e+870',
    '+5.35090808971096424467133422470805781e+909',
    '+2.16117469769979326571518209176467667e+949',
    '+1.68094360014785832214876780698752741e+989',
    '+2.46596231224141873152897352659743310e+1029',
    '+6.69136133257633373813072061684170699e+1069',
    '+3.29737130784864316153222745990138673e+1110',
    '+2.90027368880998769412885765503678326e+1151',
    '+4.47964020731247709293854154677691596e+1192',
    '+1.19641999974741190914414431549965447e+1234',
    '+5.44528951863630699294260477558597778e+1275',
    '+4.16528478663265416856309685061018538e+1317',
    '+5.28504512512583234126389723340519681e+1359',
    '+1.09852143386029963348144968536491412e+1402',
    '+3.69624802581714469084053913210353883e+1444',
    '+1.99061011272471512689500879301421451e+1487',
    '+1.69742181279420379386503220619132270e+1530',
    '+2.26823825575142131255980612298093295e+1573',
    '+4.70323556754388815204962841135454251e+1616',
    '+1.49903614447306459330826068178204826e+1660',
    '+7.27789175914272529417292625836445594e+1703',
    '+5.33592819551240570973377164238950281e+1747',
    '+5.85882068366170855342236377741943082e+1791',
    '+9.55728102705697044611754198378566030e+1835',
    '+2.29850417105056075619235210606259864e+1880',
    '+8.08971060455738243016203150276177139e+1924',
    '+4.13720796521752041053050805386375922e+1969',
    '+3.05345614597816164582345471073790450e+2014',
    '+3.23084795272485636694393980424818620e+2059',
    '+4.86983141221469211917289582228508416e+2104',
    '+1.03923132885160922482233503943089864e+2150',
    '+3.12126806833819945889176493238481974e+2195',
    '+1.31182768398402511174435834778399634e+2241',
    '+7.67252228080694439735866856637964654e+2286',
    '+6.21129738133960687706282445974212906e+2332',
    '+6.92390450563330178846148278663422074e+2378',
    '+1.05744378505391541199102941007672202e+2425',
    '+2.20181928480795405509211770603311317e+2471',
    '+6.22113463665521369604174068513122400e+2517',
    '+2.37425979196319369383757678132139174e+2564',
    '+1.21849507051854920806654411173698559e+2611',
    '+8.37295691983238673049007062562278548e+2657',
    '+7.67132053078199935920009773995131623e+2704',
    '+9.33310084393021656789450800715864493e+2751',
    '+1.50184202300344959033799790094592416e+2799',
    '+3.18412722947632272773220801727926821e+2846',
    '+8.86125834394592566727216453150426569e+2893',
    '+3.22517948915495742349290595788774412e+2941',
    '+1.52975735756834262991256082724328206e+2989',
    '+9.42319952595478495553395998127899248e+3036',
    '+7.51306558344496470479570706050116162e+3084',
    '+7.72773120824010179184551559965944156e+3132',
    '+1.02214342027002972168255108491773037e+3181',
    '+1.73316610732037731038876504765998784e+3229',
    '+3.75589858990025479589481294227571184e+3277',
    '+1.03715034650505289230207763788352270e+3326',
    '+3.63884496365180016808062351190070504e+3374',
    '+1.61751744455702025086491965530118919e+3423',
    '+9.08440236815702565843030025224652660e+3471',
    '+6.42882906445293964054147519865556089e+3520',
    '+5.71753073427761194916291733781074992e+3569',
    '+6.37389859829851340022881911319772874e+3618',
    '+8.88435190810858155115125256646660613e+3667',
    '+1.54453758058234789298017795698410121e+3717',
    '+3.34098802417699522351564081593703704e+3766',
    '+8.97076172060559176230095800755753387e+3815',
    '+2.98303173866272791201688239951587912e+3865',
    '+1.22568255729602707502702153496002615e+3915',
    '+6.20908659583348770719249208717684323e+3964',
    '+3.86958991363574575878627523129665292e+4014',
    '+2.96051276191437626818506412960054931e+4064',
    '+2.77478724685634765115227807646604314e+4114',
    '+3.17956241012382087578705283397501097e+4164',
    '+4.44540885470315644057680807036093474e+4214',
    '+7.56853185420275088133874643207881721e+4264',
    '+1.56614742596747185173656286731874851e+4315',
    '+3.93148221264316732379836632739005868e+4365',
    '+1.19503310506395297988508675434270665e+4416',
    '+4.39052031053386419818620236802663043e+4466',
    '+1.94621918590048211613785506477563525e+4517',
    '+1.03907969660921565101173608760330477e+4568',
    '+6.67026273060300930659501812225273074e+4618',
    '+5.13976436809289046623516243179535059e+4669',
    '+4.74604776985189143857600204752925811e+4720',
    '+5.24330276965152053675952126461515991e+4771',
    '+6.91941751868863603233513125358433165e+4822',
    '+1.08904527435538965461419665176131097e+4874',
    '+2.04110823109132319887750995937125750e+4925',
]

BERNOULLI = _recurrence.TabulatedSequence(
    dense=_precision.xarray(_bernoulli_dense),
    sparse=_precision.xarray(_bernoulli_sparse),
    start=270,
    spacing=20,
    ratio=_precision.xconst('39.4784176043574344753379639995046045'), # (2π)^2
    maxindex=2312,
    sign=-1,
)
